"""
Implementation of the KEC ampacity tables for copper conductors in amperes.

Each entry holds a pair of current-carrying capacities: with two loaded
conductors (single-phase circuit) and with three loaded conductors (three-phase
circuit). Values apply at the reference ambient temperature of 30 °C in air
and 20 °C in the ground.

References
----------
KEC / IEC 60364-5-52, Table B.52.4 (PVC, 70 °C), Table B.52.5 (XLPE, 90 °C),
Tables B.52.10 to B.52.13 (methods E and F).
"""
from ....materials import InsulationClass
from ....utils.lookup_table import LookupTable, LookupTableError
from ..exceptions import UnsupportedAmpacityCombination

__all__ = [
    "AMPACITY_TABLES",
    "get_ampacity_pair",
    "get_ampacity"
]

_SIZES = [
    "1.5", "2.5", "4", "6", "10", "16", "25", "35", "50",
    "70", "95", "120", "150", "185", "240", "300", "400", "500"
]


def _create_table(
    insulation: InsulationClass,
    columns: dict[str, list[tuple[float, float]]]
) -> LookupTable:
    col_header = {}
    for method in columns:
        col_header[(method, 2)] = f"method {method}, 2 loaded conductors"
        col_header[(method, 3)] = f"method {method}, 3 loaded conductors"
    data = []
    for i in range(len(_SIZES)):
        row = []
        for pairs in columns.values():
            row.extend(pairs[i])
        data.append(row)
    description = (
        f"current-carrying capacities in amperes, copper, "
        f"{insulation.value} insulation"
    )
    return LookupTable.create(
        row_header=_SIZES,
        col_header=col_header,
        data=data,
        description=description,
        rows_description="nominal conductor size in mm²",
        cols_description="installation method and number of loaded conductors"
    )


def _create_pvc_table() -> LookupTable:
    columns = {
        "A1": [
            (14.5, 13.5), (19.5, 18.0), (26.0, 24.0), (34.0, 31.0),
            (46.0, 42.0), (61.0, 56.0), (80.0, 73.0), (99.0, 89.0),
            (119.0, 108.0), (151.0, 136.0), (182.0, 164.0), (210.0, 188.0),
            (240.0, 216.0), (273.0, 245.0), (321.0, 286.0), (367.0, 328.0),
            (424.0, 379.0), (488.0, 436.0),
        ],
        "A2": [
            (14.0, 13.0), (18.5, 17.5), (25.0, 23.0), (32.0, 29.0),
            (43.0, 39.0), (57.0, 52.0), (75.0, 68.0), (92.0, 83.0),
            (110.0, 99.0), (139.0, 125.0), (167.0, 150.0), (192.0, 172.0),
            (219.0, 196.0), (248.0, 223.0), (291.0, 261.0), (334.0, 298.0),
            (386.0, 345.0), (444.0, 397.0),
        ],
        "B1": [
            (17.5, 15.5), (24.0, 21.0), (32.0, 28.0), (41.0, 36.0),
            (57.0, 50.0), (76.0, 68.0), (101.0, 89.0), (125.0, 110.0),
            (151.0, 134.0), (192.0, 171.0), (232.0, 207.0), (269.0, 239.0),
            (309.0, 275.0), (353.0, 314.0), (415.0, 369.0), (477.0, 423.0),
            (555.0, 490.0), (642.0, 565.0),
        ],
        "B2": [
            (16.5, 15.0), (23.0, 20.0), (30.0, 27.0), (38.0, 34.0),
            (52.0, 46.0), (69.0, 62.0), (90.0, 80.0), (111.0, 99.0),
            (133.0, 118.0), (168.0, 149.0), (201.0, 179.0), (232.0, 206.0),
            (265.0, 236.0), (300.0, 268.0), (351.0, 313.0), (401.0, 358.0),
            (464.0, 414.0), (533.0, 476.0),
        ],
        "C": [
            (19.5, 17.5), (27.0, 24.0), (36.0, 32.0), (46.0, 41.0),
            (63.0, 57.0), (85.0, 76.0), (112.0, 96.0), (138.0, 119.0),
            (168.0, 144.0), (213.0, 184.0), (258.0, 223.0), (299.0, 259.0),
            (344.0, 299.0), (392.0, 341.0), (461.0, 403.0), (530.0, 464.0),
            (614.0, 545.0), (707.0, 638.0),
        ],
        "D1": [
            (22.0, 18.0), (29.0, 24.0), (37.0, 30.0), (46.0, 38.0),
            (61.0, 50.0), (79.0, 64.0), (101.0, 82.0), (122.0, 98.0),
            (144.0, 116.0), (178.0, 143.0), (211.0, 169.0), (240.0, 192.0),
            (271.0, 217.0), (304.0, 243.0), (351.0, 280.0), (396.0, 316.0),
            (454.0, 363.0), (513.0, 410.0),
        ],
        "D2": [
            (24.0, 19.0), (32.0, 24.0), (41.0, 33.0), (51.0, 41.0),
            (67.0, 54.0), (87.0, 70.0), (112.0, 92.0), (136.0, 110.0),
            (161.0, 130.0), (200.0, 162.0), (239.0, 193.0), (273.0, 220.0),
            (310.0, 246.0), (349.0, 278.0), (404.0, 320.0), (458.0, 359.0),
            (524.0, 414.0), (590.0, 467.0),
        ],
        "E": [
            (22.0, 18.5), (30.0, 25.0), (40.0, 34.0), (51.0, 43.0),
            (70.0, 60.0), (94.0, 80.0), (119.0, 101.0), (148.0, 126.0),
            (180.0, 153.0), (232.0, 196.0), (282.0, 238.0), (328.0, 276.0),
            (379.0, 319.0), (434.0, 364.0), (514.0, 430.0), (593.0, 497.0),
            (694.0, 592.0), (806.0, 706.0),
        ],
        "F": [
            (25.0, 21.0), (34.0, 28.0), (45.0, 38.0), (58.0, 48.0),
            (79.0, 67.0), (105.0, 89.0), (133.0, 113.0), (166.0, 141.0),
            (201.0, 171.0), (259.0, 219.0), (315.0, 266.0), (367.0, 309.0),
            (424.0, 357.0), (486.0, 408.0), (575.0, 482.0), (664.0, 557.0),
            (777.0, 664.0), (903.0, 791.0),
        ],
    }
    return _create_table(InsulationClass.PVC, columns)


def _create_xlpe_table() -> LookupTable:
    columns = {
        "A1": [
            (19.5, 17.0), (26.0, 23.0), (35.0, 31.0), (45.0, 40.0),
            (61.0, 54.0), (81.0, 73.0), (106.0, 95.0), (131.0, 117.0),
            (158.0, 141.0), (200.0, 179.0), (241.0, 216.0), (278.0, 249.0),
            (318.0, 285.0), (362.0, 324.0), (424.0, 380.0), (486.0, 435.0),
            (561.0, 503.0), (645.0, 578.0),
        ],
        "A2": [
            (18.5, 16.5), (25.0, 22.0), (33.0, 30.0), (42.0, 38.0),
            (57.0, 51.0), (76.0, 68.0), (99.0, 89.0), (121.0, 109.0),
            (145.0, 130.0), (183.0, 164.0), (220.0, 197.0), (253.0, 227.0),
            (290.0, 259.0), (329.0, 295.0), (386.0, 346.0), (442.0, 396.0),
            (511.0, 458.0), (587.0, 526.0),
        ],
        "B1": [
            (23.0, 20.0), (31.0, 28.0), (42.0, 37.0), (54.0, 48.0),
            (75.0, 66.0), (100.0, 88.0), (133.0, 117.0), (164.0, 144.0),
            (198.0, 175.0), (253.0, 222.0), (306.0, 269.0), (354.0, 312.0),
            (407.0, 358.0), (464.0, 408.0), (546.0, 481.0), (628.0, 553.0),
            (732.0, 644.0), (846.0, 745.0),
        ],
        "B2": [
            (22.0, 19.5), (30.0, 27.0), (40.0, 35.0), (51.0, 45.0),
            (69.0, 62.0), (91.0, 82.0), (119.0, 107.0), (146.0, 131.0),
            (175.0, 158.0), (221.0, 200.0), (265.0, 240.0), (305.0, 276.0),
            (349.0, 316.0), (395.0, 358.0), (462.0, 419.0), (528.0, 479.0),
            (609.0, 553.0), (698.0, 635.0),
        ],
        "C": [
            (24.0, 22.0), (33.0, 30.0), (45.0, 40.0), (58.0, 52.0),
            (80.0, 71.0), (107.0, 96.0), (138.0, 119.0), (171.0, 147.0),
            (209.0, 179.0), (269.0, 229.0), (328.0, 278.0), (382.0, 322.0),
            (441.0, 371.0), (506.0, 424.0), (599.0, 500.0), (693.0, 576.0),
            (812.0, 673.0), (942.0, 778.0),
        ],
        "D1": [
            (28.0, 22.0), (36.0, 29.0), (46.0, 37.0), (57.0, 46.0),
            (75.0, 60.0), (97.0, 77.0), (123.0, 99.0), (149.0, 119.0),
            (176.0, 140.0), (218.0, 173.0), (259.0, 204.0), (295.0, 233.0),
            (334.0, 263.0), (376.0, 295.0), (434.0, 340.0), (492.0, 384.0),
            (565.0, 441.0), (641.0, 499.0),
        ],
        "D2": [
            (31.0, 24.0), (41.0, 31.0), (52.0, 40.0), (65.0, 50.0),
            (85.0, 66.0), (110.0, 85.0), (141.0, 109.0), (170.0, 132.0),
            (202.0, 156.0), (251.0, 193.0), (300.0, 229.0), (343.0, 261.0),
            (390.0, 296.0), (440.0, 333.0), (510.0, 385.0), (578.0, 436.0),
            (664.0, 500.0), (753.0, 566.0),
        ],
        "E": [
            (26.0, 23.0), (36.0, 32.0), (49.0, 42.0), (63.0, 54.0),
            (86.0, 75.0), (115.0, 100.0), (149.0, 127.0), (185.0, 158.0),
            (225.0, 192.0), (289.0, 246.0), (352.0, 298.0), (410.0, 346.0),
            (473.0, 399.0), (542.0, 456.0), (641.0, 538.0), (741.0, 621.0),
            (868.0, 742.0), (1008.0, 887.0),
        ],
        "F": [
            (29.0, 25.0), (40.0, 35.0), (55.0, 47.0), (71.0, 60.0),
            (96.0, 83.0), (128.0, 111.0), (166.0, 141.0), (206.0, 176.0),
            (251.0, 214.0), (323.0, 274.0), (393.0, 332.0), (458.0, 386.0),
            (529.0, 445.0), (606.0, 509.0), (717.0, 601.0), (829.0, 694.0),
            (971.0, 828.0), (1127.0, 990.0),
        ],
    }
    return _create_table(InsulationClass.XLPE, columns)


AMPACITY_TABLES: dict[str, LookupTable] = {
    "PVC": _create_pvc_table(),
    "XLPE": _create_xlpe_table()
}


def get_ampacity_pair(
    size: str,
    insulation: InsulationClass | str,
    install_method: str
) -> tuple[float, float]:
    """
    Returns the current-carrying capacities in amperes with two and with three
    loaded conductors.

    Parameters
    ----------
    size: str
        Nominal conductor size in mm², e.g. "2.5".
    insulation: InsulationClass | str
        Insulation class, "PVC" or "XLPE".
    install_method: str
        Installation method code, e.g. "B1".

    Returns
    -------
    tuple[float, float]
        (two loaded, three loaded)

    Raises
    ------
    UnsupportedAmpacityCombination
        If the tables hold no value for the combination.
    """
    table = AMPACITY_TABLES.get(insulation)
    try:
        if table is None:
            raise LookupTableError(f"No ampacity table for {insulation!r}.")
        I_2 = table.data_value(size, (install_method, 2))
        I_3 = table.data_value(size, (install_method, 3))
    except LookupTableError as err:
        raise UnsupportedAmpacityCombination(
            f"No current-carrying capacity for {size} mm², {insulation} "
            f"insulation, installation method {install_method!r}."
        ) from err
    return I_2, I_3


def get_ampacity(
    size: str,
    insulation: InsulationClass | str,
    install_method: str,
    num_loaded_conductors: int
) -> float:
    """
    Returns the current-carrying capacity in amperes for 2 or 3 loaded
    conductors.
    """
    if num_loaded_conductors not in (2, 3):
        raise ValueError(
            "The number of loaded conductors is limited to 2 or 3."
        )
    I_2, I_3 = get_ampacity_pair(size, insulation, install_method)
    return I_2 if num_loaded_conductors == 2 else I_3
