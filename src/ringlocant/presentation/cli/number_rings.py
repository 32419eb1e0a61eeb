#!/usr/bin/env python3
# src/ringlocant/presentation/cli/number_rings.py

"""
Command-line interface for numbering the fused ring systems of molecules.

Each molecule is read as SMILES, split into fused ring systems and every
system is numbered. Output is one line per ring system listing element and
locant for each atom in numbering order.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from ...core.domain.models.fragment import Fragment
from ...core.exceptions import NumberingError
from ...core.services.numbering_service import FusedRingNumberer
from ...infrastructure.adapters.rdkit_adapter import RDKitAdapter


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up logging configuration.

    Args:
        verbose: Whether to enable verbose logging

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("ringlocant")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)

    return logger


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Assign IUPAC locants to fused ring systems"
    )
    parser.add_argument("smiles", nargs="*", help="SMILES strings to number")
    parser.add_argument(
        "--input", type=Path, help="File with one SMILES string per line"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    return parser


def read_smiles_file(path: Path) -> List[str]:
    """Read SMILES strings, skipping blank lines and '#' comments."""
    with open(path) as f:
        lines = [line.split()[0] for line in f if line.strip() and not line.startswith("#")]
    return lines


def format_locants(fragment: Fragment) -> str:
    """Element and locant of every atom in fragment order, e.g. 'C1 C2 N3'."""
    return " ".join(f"{atom.element}{atom.locant}" for atom in fragment.atoms)


def number_molecule(
    smiles: str, adapter: RDKitAdapter, numberer: FusedRingNumberer, logger: logging.Logger
) -> Tuple[List[str], int]:
    """Number every ring system of one molecule.

    Returns:
        Output lines of the numbered systems and the number of systems that failed
    """
    lines = []
    failed = 0
    for index, fragment in enumerate(adapter.from_smiles(smiles)):
        try:
            result = numberer.number(fragment)
        except NumberingError as e:
            logger.error(f"Failed to number ring system {index} of {smiles}: {str(e)}")
            failed += 1
            continue
        lines.append(f"{smiles}\t{index}\t{result.topology.value}\t{format_locants(fragment)}")
    return lines, failed


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ring numbering CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose)

    smiles_list = list(args.smiles)
    if args.input:
        smiles_list.extend(read_smiles_file(args.input))
    if not smiles_list:
        parser.error("no SMILES given")

    adapter = RDKitAdapter()
    numberer = FusedRingNumberer()

    failures = 0
    for smiles in tqdm(smiles_list, desc="Numbering", disable=len(smiles_list) < 2):
        try:
            lines, failed = number_molecule(smiles, adapter, numberer, logger)
        except ValueError as e:
            logger.error(f"Skipping {smiles}: {str(e)}")
            failures += 1
            continue
        if failed:
            failures += 1
        for line in lines:
            print(line)

    logger.info(f"Processed {len(smiles_list)} molecules, {failures} failed")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
