"""
Calculating a bundle of multicore cables with the high-level, user API.
"""
from kec_cable import Q_, VoltageSystem, CoreCount, SizingConfig
from kec_cable.catalogue import CableType, InstallationMethod
from kec_cable.sizing import CableRun


run = CableRun(
    cable_type=CableType.TFR_CV,
    cores=CoreCount.FOUR,
    S=Q_(16, 'mm ** 2'),
    quantity=3,
    system=VoltageSystem.THREE_PHASE,
    install_method=InstallationMethod.B2,
    config=SizingConfig(max_fill_ratio=0.33)
)

print(
    f"installation method = {run.install_method_used} ({run.insulation})",
    f"grouping factor = {run.k_group:.2f} ({run.num_circuits} circuits)",
    f"total installed area = {run.A_total:~P.2f}",
    f"conductor area = {run.A_cond:~P.2f}",
    f"current-carrying capacity = {run.I_z:~P.1f}",
    f"reference ambient = {run.T_amb_ref:~P.0f}",
    f"conduit = {run.conduit} ({run.fill_rate:~P.1f})",
    sep="\n"
)
