"""Adapters – HTTP transport and the OneSignal REST client."""
