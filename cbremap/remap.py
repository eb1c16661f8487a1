import logging

from cbremap.barcodes import check_barcode
import cbremap.util as util


class Remapper:
    """
    Resolves observed barcodes against a BarcodeLookup. Only sequences owned
    by exactly one barcode to use are re-mapped. Blocked (a barcode to use
    itself), ambiguous and unknown sequences resolve to None.

    The lookup table must be complete (and the barcodes to use collapsed, if
    desired) before the first query.
    """

    logger = logging.getLogger("cbremap.remap.Remapper")

    def __init__(self, lookup, barcodes, barcode_length=12):
        self.lookup = lookup
        self.barcodes = barcodes
        self.barcode_length = barcode_length
        self.n_resolved = 0
        self.n_unresolved = 0

    def resolve(self, observed):
        check_barcode(observed, self.barcode_length)

        outcome = self.lookup.lookup(observed)
        if outcome.is_owned:
            return outcome.target

        return None

    def remap(self, src):
        """
        Generator over (observed, barcode to use) pairs for every observed
        barcode from src which can be resolved. The barcode to use is
        reported by its display sequence, which carries wildcards if it was
        collapsed.
        """
        for observed in util.timed_loop(src, self.logger, T=15):
            target = self.resolve(observed)
            if target is None:
                self.n_unresolved += 1
                continue

            self.n_resolved += 1
            yield observed, self.barcodes[target].seq

        n = self.n_resolved + self.n_unresolved
        self.logger.info(
            f"re-mapped {self.n_resolved} of {n} barcodes "
            f"({self.n_unresolved} could not be resolved unambiguously)"
        )
