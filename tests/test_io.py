import pandas as pd

from lollipop_mapper.io import (
    gene_list,
    load_mutations,
    parse_mutation_input,
    pileups_to_dataframe,
    records_to_dataframe,
    sample_list,
)
from lollipop_mapper.pileup import convert_to_pileups

MUTATION_FILE = (
    "Hugo_Symbol\tSample_ID\tProtein_Change\tMutation_Type\tCancer_Type\tProtein_Position_Start\tMutation_SID\tVAF\n"
    "BRAF\tS1\tV600E\tMissense_Mutation\tMelanoma\t600\tev1\t0.4\n"
    "braf\tS2\tV600K\tMissense_Mutation\tMelanoma\t\tev2\t\n"
    "BRAF\tS3\tV600E\tMissense_Mutation\tThyroid\tNA\tev1\t0.2\n"
    "KRAS\tS1\tG12D\tMissense_Mutation\tColorectal\t12\t\t\n"
)


def test_parse_mutation_input():
    records = parse_mutation_input(MUTATION_FILE)

    assert len(records) == 4
    first = records[0]
    assert first.gene_symbol == "BRAF"
    assert first.case_id == "S1"
    assert first.protein_start_position == 600
    assert first.extra == {"vaf": "0.4"}
    assert records[1].protein_start_position == 600


def test_missing_ids_are_generated():
    records = parse_mutation_input(MUTATION_FILE)
    kras = records[3]
    assert kras.mutation_id.startswith("stalone_mut_")
    assert kras.mutation_sid == kras.mutation_id


def test_parsed_records_are_deduplicated_by_sid():
    pileups = convert_to_pileups(parse_mutation_input(MUTATION_FILE))
    by_location = {p.location: p.count for p in pileups}
    assert by_location == {600: 2, 12: 1}


def test_blank_input():
    assert parse_mutation_input("  \n") == []


def test_load_mutations(tmp_path):
    path = tmp_path / "mutations.tsv"
    path.write_text(MUTATION_FILE)
    assert len(load_mutations(str(path))) == 4


def test_sample_and_gene_lists():
    records = parse_mutation_input(MUTATION_FILE)
    assert sample_list(records) == ["S1", "S2", "S3"]
    assert gene_list(records) == ["BRAF", "KRAS"]


def test_dataframe_exports():
    records = parse_mutation_input(MUTATION_FILE)
    df = records_to_dataframe(records)
    assert list(df["position"]) == [600, 600, 600, 12]

    pileups = convert_to_pileups(records)
    summary = pileups_to_dataframe(pileups)
    assert isinstance(summary, pd.DataFrame)
    assert list(summary["location"]) == [600, 12]
    assert summary.loc[0, "label"] == "V600E/K"
    assert summary.loc[0, "top_cancer_type"] == "Melanoma"
    assert pileups_to_dataframe([]).empty
