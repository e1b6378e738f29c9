"""Test-runner configuration.

Hypothesis builds its unicode charmap cache on first use in a clean tree,
which trips the ``too_slow`` health check on the first property test.
"""
from hypothesis import HealthCheck, settings

settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")
