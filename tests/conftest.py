import itertools

import pytest

from lollipop_mapper.model import MutationRecord

_ids = itertools.count(1)


def make_mutation(protein_change=None, mutation_type="Missense_Mutation",
                  cancer_type="Melanoma", sid=None, position=None, **kwargs):
    mutation_id = kwargs.pop("mutation_id", f"mut_{next(_ids)}")
    return MutationRecord(
        mutation_id=mutation_id,
        mutation_sid=sid or mutation_id,
        gene_symbol=kwargs.pop("gene_symbol", "BRAF"),
        protein_change=protein_change,
        mutation_type=mutation_type,
        cancer_type=cancer_type,
        protein_pos_start=position,
        **kwargs,
    )


@pytest.fixture
def mutation():
    return make_mutation


@pytest.fixture
def braf_mutations():
    """A small BRAF-like cohort: a V600 hotspot and a few scattered sites."""
    return [
        make_mutation("V600E", cancer_type="Melanoma"),
        make_mutation("V600E", cancer_type="Colorectal"),
        make_mutation("V600K", cancer_type="Melanoma"),
        make_mutation("V600E", cancer_type="Thyroid"),
        make_mutation("G469A", cancer_type="Lung"),
        make_mutation("G469V", cancer_type="Lung"),
        make_mutation("D594G", mutation_type="Missense_Mutation", cancer_type="Colorectal"),
        make_mutation("K601E", cancer_type="Thyroid"),
        make_mutation("X12_splice", mutation_type="Splice_Site", cancer_type="Lung"),
        make_mutation("BRAF-KIAA1549", mutation_type="Fusion", cancer_type="Glioma"),
    ]
