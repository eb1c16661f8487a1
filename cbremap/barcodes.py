import logging
from collections import namedtuple
from dataclasses import dataclass, field
from typing import List

from cbremap.errors import BarcodeLengthError, BarcodeCountError, DuplicateBarcodeError
import cbremap.util as util

logger_name = "cbremap.barcodes"

# another barcode to use at substitution distance 1 and the position they differ at
Hit = namedtuple("Hit", ["partner", "pos"])


def check_barcode(barcode, barcode_length, source=None, line=None):
    if len(barcode) != barcode_length:
        raise BarcodeLengthError(barcode, barcode_length, source=source, line=line)

    return barcode


def read_barcodes(fname, barcode_length=12):
    """
    Yields the barcodes from a file with one barcode per line. Any line of the
    wrong length aborts with BarcodeLengthError.
    """
    for n, barcode in util.read_lines(fname):
        yield check_barcode(barcode, barcode_length, source=fname, line=n)


@dataclass
class TrustedBarcode:
    id: int
    original: str
    seq: str = ""
    hits: List[Hit] = field(default_factory=list)

    def __post_init__(self):
        if not self.seq:
            self.seq = self.original

    def add_hit(self, partner, pos):
        # most recent hit first
        self.hits.insert(0, Hit(partner, pos))

    def hit_pos(self, partner):
        for hit in self.hits:
            if hit.partner == partner:
                return hit.pos

        raise KeyError(f"barcode #{self.id} has no hit with barcode #{partner}")

    def wildcard(self, pos, wildcard="N"):
        """
        Overwrites the display sequence at pos with the wildcard symbol.
        Returns the (before, after) pair of display sequences.
        """
        before = self.seq
        self.seq = before[:pos] + wildcard + before[pos + 1:]
        return before, self.seq


class BarcodeSet:
    """
    The barcodes to use, in the order they were read. Identifiers are 1-based.
    """

    logger = logging.getLogger(logger_name)

    def __init__(self, barcode_length=12, n_max=None):
        self.barcode_length = barcode_length
        self.n_max = n_max
        self.barcodes = []
        self.ids = {}

    def add(self, seq, source=None, line=None):
        if self.n_max is not None and len(self.barcodes) >= self.n_max:
            raise BarcodeCountError(len(self.barcodes) + 1, self.n_max, source=source)

        check_barcode(seq, self.barcode_length, source=source, line=line)

        if seq in self.ids:
            raise DuplicateBarcodeError(seq, self.ids[seq], len(self.barcodes) + 1)

        bc = TrustedBarcode(id=len(self.barcodes) + 1, original=seq)
        self.barcodes.append(bc)
        self.ids[seq] = bc.id
        return bc

    @classmethod
    def from_iter(cls, seqs, n_barcodes_use, barcode_length=12, source=None):
        bs = cls(barcode_length=barcode_length, n_max=n_barcodes_use)
        for n, seq in enumerate(seqs, start=1):
            bs.add(seq, source=source, line=n)

        if len(bs) < n_barcodes_use:
            raise BarcodeCountError(len(bs), n_barcodes_use, source=source)

        bs.logger.info(f"loaded {len(bs)} barcodes to use (length={barcode_length})")
        return bs

    @classmethod
    def from_file(cls, fname, n_barcodes_use, barcode_length=12):
        return cls.from_iter(
            (seq for n, seq in util.read_lines(fname)),
            n_barcodes_use,
            barcode_length=barcode_length,
            source=fname,
        )

    def __getitem__(self, bc_id):
        if bc_id < 1:
            raise IndexError(f"barcode ids start at 1, got {bc_id}")

        return self.barcodes[bc_id - 1]

    def __iter__(self):
        return iter(self.barcodes)

    def __len__(self):
        return len(self.barcodes)

    def id_of(self, seq):
        return self.ids.get(seq)

    def n_with_hits(self):
        return sum([1 for bc in self.barcodes if bc.hits])
