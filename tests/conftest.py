import jax.numpy as jnp
import pytest

from skyframes.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Round-trip checks compare to 1e-9, which float32 cannot reach. Tests
    that exercise other dtypes (test_config.py) override this with their own
    autouse fixture.
    """
    set_dtype(jnp.float64)
