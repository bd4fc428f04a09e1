"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype of every
rotation matrix and column vector skyframes builds. The default is
``jnp.float32``. Switching to ``jnp.float64`` automatically enables JAX's
64-bit mode (``jax_enable_x64``), which is needed for round trips that must
agree to better than ~1e-7.

Call ``set_dtype`` **before** any JIT compilation. Under JIT, ``get_dtype()``
runs during tracing and its result is baked into the compiled program.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for skyframes.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float32``).
    """
    return _dtype


def get_matrix_tolerance() -> float:
    """Return the dtype-adaptive tolerance for matrix comparisons.

    Used when checking whether two registered edge matrices are mutual
    inverses. The tolerance scales with the configured float dtype:

    - ``float64``:  1e-12
    - ``float32``:  1e-6
    - ``float16``:  1e-3
    - ``bfloat16``: 1e-3

    Returns:
        float: Absolute tolerance for element-wise comparisons.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-6
    # float16 and bfloat16
    return 1e-3
