"""
Filling the selection lists of a user interface and running a calculation
through the command dispatch.
"""
from kec_cable.commands import invoke


cable_types = invoke("get_cable_types")
print([t["code"] for t in cable_types])

options = invoke("get_cable_options", cable_type="CV")
cores = invoke(
    "get_cores_for_system",
    system="1Φ",
    available_cores=[code for code, _ in options["cores"]]
)
print(cores)

methods = invoke("get_install_methods_for_cores", cores="2C")
print(methods)

result = invoke(
    "calculate",
    cable_type="CV",
    cores="2C",
    size="4",
    quantity=2,
    system="1Φ",
    ground_wire="HFIX",
    install_method="B2"
)
print(result)
