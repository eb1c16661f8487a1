__version__ = "0.3.0"
__author__ = [
    "Marcel Schilling",
]
__license__ = "GPL"
__email__ = [
    "marcel.schilling@mdc-berlin.de",
]

author_contributions = """
cbremap started out as a small C program re-mapping Drop-seq cell barcodes
with one substitution or one deletion onto a list of barcodes to use. It was
rewritten in python with the same classification rules, plus collapsing of
barcodes to use which are themselves only one substitution apart.
"""

roadmap = [
    (
        "0.1",
        "re-map barcodes with 1 mismatch onto the barcodes to use, "
        "block the barcodes to use themselves",
    ),
    (
        "0.2",
        "barcodes with 1 deletion (downstream UMI base shifted in), "
        "number of barcodes to use as optional argument",
    ),
    (
        "0.3",
        "collapse barcodes to use at distance 1 into a single "
        "wildcard barcode. YAML config, gzip input, stats output.",
    ),
]
