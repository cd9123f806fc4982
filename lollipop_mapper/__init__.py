"""lollipop_mapper: mutation pileups, axis scales and diagram state for lollipop plots."""

from .config import DEFAULT_FILL_PALETTE, DiagramOptions
from .model import CancerTypeStat, MutationRecord, Pileup, protein_change_location
from .styles import DEFAULT_STYLES, MainTypeGroup, MutationStyles, normalize_type
from .pileup import (
    convert_to_pileups,
    count_mutations,
    generate_label,
    group_mutations_by_main_type,
    map_to_mutations,
    remove_redundant_mutations,
)
from .scale import (
    AxisScale,
    Bounds,
    calc_bounds,
    compute_domain_max,
    compute_tick_interval,
    compute_tick_values,
    x_axis_scale,
    y_axis_scale,
)
from .io import (
    load_mutations,
    parse_mutation_input,
    pileups_to_dataframe,
    records_from_dataframe,
)
from .visualization.colors import LollipopColorMap, hex_to_rgb
from .visualization.labels import plan_labels
from .explorer import DiagramEvent, DiagramSnapshot, MutationDiagram

__all__ = [
    # config & model
    "DiagramOptions",
    "DEFAULT_FILL_PALETTE",
    "MutationRecord",
    "Pileup",
    "CancerTypeStat",
    "protein_change_location",
    # styles
    "MutationStyles",
    "MainTypeGroup",
    "DEFAULT_STYLES",
    "normalize_type",
    # aggregation
    "convert_to_pileups",
    "remove_redundant_mutations",
    "generate_label",
    "count_mutations",
    "map_to_mutations",
    "group_mutations_by_main_type",
    # scales
    "AxisScale",
    "Bounds",
    "calc_bounds",
    "compute_domain_max",
    "compute_tick_interval",
    "compute_tick_values",
    "x_axis_scale",
    "y_axis_scale",
    # io
    "load_mutations",
    "parse_mutation_input",
    "records_from_dataframe",
    "pileups_to_dataframe",
    # visualization
    "LollipopColorMap",
    "hex_to_rgb",
    "plan_labels",
    # explorer
    "MutationDiagram",
    "DiagramEvent",
    "DiagramSnapshot",
]
