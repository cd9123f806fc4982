from lollipop_mapper.config import DEFAULT_FILL_PALETTE, DiagramOptions
from lollipop_mapper.explorer import MutationDiagram
from lollipop_mapper.model import Pileup
from lollipop_mapper.pileup import convert_to_pileups, group_mutations_by_main_type
from lollipop_mapper.styles import MutationStyles, normalize_type
from lollipop_mapper.visualization.colors import LollipopColorMap, hex_to_rgb, to_rgba


def _pileup(mutation, types):
    return convert_to_pileups([mutation("R175H", mutation_type=t) for t in types])[0]


def test_hex_to_rgb():
    assert hex_to_rgb("#FF0000") == (255, 0, 0)
    assert hex_to_rgb("not-a-colour") == (0, 0, 0)
    assert to_rgba("#FFFFFF", 0.5) == "rgba(255, 255, 255, 0.5)"


def test_normalize_type():
    assert normalize_type(" Frame-Shift Del ") == "frame_shift_del"
    assert normalize_type(None) == ""


def test_constant_palette(mutation):
    pileup = _pileup(mutation, ["Nonsense_Mutation"])
    assert LollipopColorMap("#123456").fill_color(pileup) == "#123456"


def test_function_palette_is_delegated(mutation):
    pileup = _pileup(mutation, ["Missense_Mutation"] * 3)
    color_map = LollipopColorMap(lambda p: "#FF0000" if p.count > 2 else "#0000FF")
    assert color_map.fill_color(pileup) == "#FF0000"


def test_dominant_main_type_wins(mutation):
    pileup = _pileup(mutation, ["Nonsense_Mutation", "Frame_Shift_Del", "Missense_Mutation"])
    assert LollipopColorMap().fill_color(pileup) == DEFAULT_FILL_PALETTE["truncating"]


def test_ties_resolved_by_priority(mutation):
    color_map = LollipopColorMap()
    tie = _pileup(mutation, ["Nonsense_Mutation", "Missense_Mutation"])
    assert color_map.fill_color(tie) == DEFAULT_FILL_PALETTE["missense"]

    tie = _pileup(mutation, ["Splice_Site", "In_Frame_Del"])
    assert color_map.fill_color(tie) == DEFAULT_FILL_PALETTE["inframe"]


def test_unknown_types_are_other(mutation):
    pileup = _pileup(mutation, ["Translation_Start_Site"])
    groups = group_mutations_by_main_type(pileup)
    assert [(g.type, g.count) for g in groups] == [("other", 1)]
    assert LollipopColorMap().fill_color(pileup) == DEFAULT_FILL_PALETTE["other"]


def test_group_order_and_members(mutation):
    pileup = _pileup(mutation, ["In_Frame_Ins", "Nonsense_Mutation", "Splice_Site", "Missense_Mutation"])
    groups = MutationStyles().group(pileup.mutations)
    assert [g.type for g in groups] == ["truncating", "missense", "inframe"]
    assert groups[0].priority == 4
    assert len(groups[0].mutation_ids) == 2


def test_empty_pileup_uses_default_colour():
    empty = Pileup(pileup_id="pileup_x", location=1, mutations=(), count=0)
    assert LollipopColorMap().fill_color(empty) == DEFAULT_FILL_PALETTE["default"]


def test_missing_palette_entry_uses_default(mutation):
    pileup = _pileup(mutation, ["Missense_Mutation"])
    color_map = LollipopColorMap({"default": "#BB0000"})
    assert color_map.fill_color(pileup) == "#BB0000"


def test_every_member_mutation_is_coloured(mutation):
    pileups = convert_to_pileups([
        mutation("V600E"), mutation("V600K"),
        mutation("R248*", mutation_type="Nonsense_Mutation"),
    ])
    color_map = LollipopColorMap()
    pileup_colors = color_map(pileups)

    assert set(pileup_colors) == {p.pileup_id for p in pileups}
    for pileup in pileups:
        for m in pileup.mutations:
            assert color_map.get(m.mutation_id) == pileup_colors[pileup.pileup_id]

    color_map.reset()
    assert color_map.mapping == {}


def test_grouped_palette_without_default(mutation):
    pileup = _pileup(mutation, ["Missense_Mutation"])
    color_map = LollipopColorMap({"missense": "#FF0000", "truncating": "#000000"})
    assert color_map.fill_color(pileup) == "#FF0000"

    empty = Pileup(pileup_id="pileup_y", location=1, mutations=(), count=0)
    assert color_map.fill_color(empty) is None


def test_diagram_accepts_grouped_palette_option(mutation):
    options = DiagramOptions.from_dict({"fillPalette": {"missense": "#FF0000"}})
    v600e = mutation("V600E")
    diagram = MutationDiagram([v600e], 766, options=options)
    assert diagram.color_of(v600e.mutation_id) == "#FF0000"
