#!/usr/bin/env python
"""Entry point for the Dash lollipop diagram.

Usage
-----
    python run_app.py --mutations path/to/mutations.tsv --gene BRAF [--length 766]

The mutation file is tab-delimited with a header row (``hugo_symbol``,
``protein_change``, ``mutation_type``, ``cancer_type``, ...).
"""

from __future__ import annotations

import argparse
import logging

from lollipop_mapper.config import DiagramOptions
from lollipop_mapper.io import gene_list, load_mutations


def main() -> None:
    parser = argparse.ArgumentParser(description="Launch the lollipop mutation diagram")
    parser.add_argument(
        "--mutations", required=True,
        help="Path to a tab-delimited mutation file",
    )
    parser.add_argument(
        "--gene", default=None,
        help="Gene symbol to plot (default: first gene in the file)",
    )
    parser.add_argument(
        "--length", type=int, default=None,
        help="Protein sequence length (default: highest mutated position)",
    )
    parser.add_argument(
        "--label-count", type=int, default=1,
        help="Maximum number of lollipop labels (default: 1)",
    )
    parser.add_argument(
        "--fixed-y", action="store_true",
        help="Keep the y axis fixed when filtering",
    )
    parser.add_argument(
        "--host", default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port", type=int, default=8050,
        help="Port to serve on (default: 8050)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Run Dash in debug mode",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log aggregation and scale decisions",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Load data
    print(f"Loading mutations from {args.mutations}...")
    records = load_mutations(args.mutations)
    genes = gene_list(records)
    print(f"  Loaded {len(records):,} mutations in {len(genes):,} gene(s)")

    if not genes:
        parser.error("No gene symbols found in the mutation file")
    gene = (args.gene or genes[0]).upper()
    records = [r for r in records if r.gene_symbol and r.gene_symbol.upper() == gene]
    if not records:
        parser.error(f"No mutations found for {gene}")

    length = args.length
    if length is None:
        positions = [r.protein_start_position for r in records]
        length = max((p for p in positions if p is not None), default=0)
        print(f"  No sequence length given, using {length} aa")

    options = DiagramOptions(
        lollipop_label_count=args.label_count,
        y_axis_auto_adjust=not args.fixed_y,
    )

    print(f"Starting Dash app for {gene} on http://{args.host}:{args.port}/")

    from lollipop_mapper.app import create_app
    app = create_app(records, length, options=options, gene_symbol=gene)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
