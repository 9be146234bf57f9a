"""
Calculating a bundle of single-core wires with the low-level API (without
using Quantity)
"""
from kec_cable.sizing.cable import (
    CableSpec,
    calculate,
    get_derating,
    UnsupportedCableSpec
)


# Ten HFIX wires of 1.5 mm² for three-phase circuits; the installation method
# is left open, so B1 (conduit on wall) is used.
spec = CableSpec(
    cable_type="HFIX",
    cores="1C",
    size="1.5",
    quantity=10,
    system="3Φ",
    ground_wire=True
)

# Intermediate results of the ampacity determination...
derating = get_derating(spec)
print(derating.install_method)
print(derating.insulation)
print(derating.num_circuits)
print(derating.grouping_factor)
print()

# Rounded results...
result = calculate(spec)
print(result.total_area)
print(result.conductor_area)
print(result.allowable_current)
print(result.recommended_conduit)
print(result.fill_rate, result.fill_status)
print(result.install_method_desc)
print()

# HFIX is a single-core wire only...
try:
    calculate(CableSpec(cable_type="HFIX", cores="2C", size="1.5"))
except UnsupportedCableSpec as err:
    print(err)
