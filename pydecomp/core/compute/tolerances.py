"""
Tolerance tiers for numerical validation.

Defines how closely a reconstruction (Q·R, P·L·U, L·Lᴴ, V·Λ·Vᴴ) must match
its input, depending on the precision the input was stored in:
- FP64 / C128 (and every integer kind): double precision
- FP32 / C64: single precision
- FP16: half precision

Used by Solution.verify() and by the test suite.
"""

from dataclasses import dataclass

from pydecomp.core.kinds import ElementKind


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='fp64',
    description='double precision (f64, c128) storage',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision (f32, c64) storage',
)

FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-2,
    name='fp16',
    description='half precision (f16) storage',
)


def select_tolerance(kind: ElementKind | str) -> ToleranceTier:
    """Select the tolerance tier for results stored in `kind`."""
    kind = ElementKind.parse(kind)
    # Integer inputs are exact and are factored in float64
    if not kind.is_float:
        return FP64
    # A complex element of N bits holds two N/2-bit parts
    part_bits = kind.bits // 2 if kind.is_complex else kind.bits
    if part_bits >= 64:
        return FP64
    if part_bits >= 32:
        return FP32
    return FP16
