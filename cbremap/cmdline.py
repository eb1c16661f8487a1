import argparse
import logging
import sys
from time import time

import cbremap.util as util
from cbremap.barcodes import BarcodeSet, read_barcodes
from cbremap.collapse import collapse
from cbremap.config import load_config_with_fallbacks
from cbremap.errors import CBRemapError
from cbremap.lookup import BarcodeLookup
from cbremap.remap import Remapper

logger_name = "cbremap.cmdline"


def count_arg(value):
    try:
        n = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")

    if n < 0:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r} (must not be negative)")

    return n


def parse_args():
    parser = util.make_minimal_parser(
        prog="cbremap",
        description="re-map cell barcodes with one substitution or one deletion onto "
        "a list of barcodes to use. Barcodes to use which are only one substitution "
        "apart are collapsed into a barcode with a wildcard at the differing position.",
    )
    parser.add_argument(
        "barcodes_use",
        help="file with the barcodes to use (i.e. to map the remaining ones to, if "
        "possible), one per line. May be gzip compressed (.gz)",
    )
    parser.add_argument(
        "barcodes_remap",
        help="file with the barcodes to re-map onto the barcodes to use, one per line. "
        "May be gzip compressed (.gz)",
    )
    parser.add_argument(
        "n_barcodes_use",
        nargs="?",
        default=None,
        type=count_arg,
        help="exact number of barcodes to use in the input list "
        "(default=n_barcodes_use from the configuration, 1000)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with barcode_length, nucleotides, wildcard and n_barcodes_use "
        "(default=./cbremap.yaml if present, otherwise built-in defaults)",
    )
    parser.add_argument(
        "--out",
        default="-",
        help="write tab-separated barcode pairs here (default=stdout)",
    )
    parser.add_argument(
        "--out-stats",
        default="",
        help="write a tab-separated summary of the run here (default=off)",
    )

    args = parser.parse_args()
    return args


def write_stats(fname, barcodes, lookup, n_collapsed, remapper):
    import pandas as pd

    data = [("barcodes_use", len(barcodes))]
    for state, count in lookup.stats().items():
        data.append((f"lookup_{state}", count))

    data += [
        ("barcodes_use_collapsed", n_collapsed),
        ("barcodes_use_not_collapsed", barcodes.n_with_hits()),
        ("barcodes_remap_resolved", remapper.n_resolved),
        ("barcodes_remap_unresolved", remapper.n_unresolved),
    ]
    df = pd.DataFrame(data, columns=["name", "count"])
    df.to_csv(util.ensure_path(fname), sep="\t", index=False)
    return df


def main(args):
    logger = logging.getLogger(logger_name)
    config = load_config_with_fallbacks(args)

    L = config["barcode_length"]
    nts = config["nucleotides"]
    n_barcodes_use = args.n_barcodes_use
    if n_barcodes_use is None:
        n_barcodes_use = config["n_barcodes_use"]

    # fail before any output is produced
    util.assert_readable([args.barcodes_use, args.barcodes_remap])

    barcodes = BarcodeSet.from_file(args.barcodes_use, n_barcodes_use, barcode_length=L)
    lookup = BarcodeLookup(nts=nts).build(barcodes)
    logger.debug(f"lookup table composition: {lookup.stats()}")
    remapper = Remapper(lookup, barcodes, barcode_length=L)

    n_collapsed = 0
    with util.open_output(args.out) as out:
        for orig, collapsed in collapse(barcodes, wildcard=config["wildcard"]):
            out.write(f"{orig}\t{collapsed}\n")
            n_collapsed += 1

        for observed, target in remapper.remap(read_barcodes(args.barcodes_remap, L)):
            out.write(f"{observed}\t{target}\n")

    if args.out_stats:
        return write_stats(args.out_stats, barcodes, lookup, n_collapsed, remapper)


def cmdline():
    args = parse_args()
    logger = util.setup_logging(args, name=logger_name)

    t0 = time()
    try:
        main(args)
    except CBRemapError as err:
        logger.error(f"aborting after {time() - t0:.2f} seconds: {err.__class__.__name__}")
        return err

    logger.info(f"finished in {time() - t0:.2f} seconds")
    return 0


def entry_point():
    # sys.exit() prints a returned error to stderr and exits with status 1
    sys.exit(cmdline())


if __name__ == "__main__":
    entry_point()
