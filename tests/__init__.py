"""
Test suite for the hash benchmark service.

This package contains:
- unit/: digest chain, models, configuration and metrics in isolation
- integration/: endpoints through the Flask test client
- contracts/: payloads validated against contracts/openapi.yaml
- smoke/: a live threaded server driven with requests
"""
