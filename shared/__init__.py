"""
Shared utilities for the Translations Lookup service.

This package aggregates common building blocks:

- config: Service configuration via pydantic-settings
- logging: Structured logging with trace correlation
- metrics: Prometheus metrics helpers
- tracing: OpenTelemetry tracing config
- errors: Canonical error types and responses

Do not import from service packages into shared/.
"""
