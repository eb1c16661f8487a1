import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from time import time
from typing import Optional

from cbremap.mutate import NUCLEOTIDES, substitutions, deletions, n_substitutions, n_deletions

logger_name = "cbremap.lookup"


class State(Enum):
    unassigned = "unassigned"
    blocked = "blocked"
    owned = "owned"
    ambiguous = "ambiguous"


@dataclass(frozen=True)
class Outcome:
    state: State
    target: Optional[int] = None

    @classmethod
    def owned_by(cls, bc_id):
        return cls(State.owned, bc_id)

    @classmethod
    def blocked_by(cls, bc_id):
        return cls(State.blocked, bc_id)

    @property
    def is_owned(self):
        return self.state is State.owned

    @property
    def is_blocked(self):
        return self.state is State.blocked

    @property
    def is_ambiguous(self):
        return self.state is State.ambiguous

    def __str__(self):
        if self.target is None:
            return self.state.value

        return f"{self.state.value}({self.target})"


UNASSIGNED = Outcome(State.unassigned)
AMBIGUOUS = Outcome(State.ambiguous)


class BarcodeLookup:
    """
    Maps every sequence within edit distance 1 of a barcode to use onto that
    barcode, as long as this is unambiguous. The barcodes to use themselves
    are blocked: they are never re-mapped to another barcode to use.

    Pairs of barcodes to use which are one substitution apart are recorded as
    hits on both TrustedBarcode instances. Collapsing them is left to
    cbremap.collapse.
    """

    logger = logging.getLogger(f"{logger_name}.BarcodeLookup")

    def __init__(self, nts=NUCLEOTIDES):
        self.nts = nts
        self.table = {}
        self.barcodes = None

    def build(self, barcodes):
        t0 = time()
        self.barcodes = barcodes
        L = barcodes.barcode_length
        n_max = len(barcodes) * (
            1 + n_substitutions(L, self.nts) + n_deletions(L, self.nts)
        )
        self.logger.debug(f"at most {n_max} entries expected for {len(barcodes)} barcodes")

        for bc in barcodes:
            self.add(bc)

        dt = time() - t0
        self.logger.info(
            f"{1000 * dt:.2f} msec building lookup table with {len(self.table)} entries "
            f"for {len(barcodes)} barcodes to use"
        )
        return self

    def add(self, bc):
        table = self.table

        # a barcode to use always maps to itself and can never be re-assigned
        table[bc.original] = Outcome.blocked_by(bc.id)

        for seq, pos in substitutions(bc.original, self.nts):
            current = table.get(seq, UNASSIGNED)
            if current.state is State.unassigned:
                table[seq] = Outcome.owned_by(bc.id)

            elif current.state is State.blocked:
                # two barcodes to use differ only at pos
                other = self.barcodes[current.target]
                bc.add_hit(other.id, pos)
                other.add_hit(bc.id, pos)
                self.logger.debug(
                    f"barcodes to use #{other.id} {other.original} and "
                    f"#{bc.id} {bc.original} differ only at position {pos}"
                )

            elif current.state is State.owned and current.target != bc.id:
                table[seq] = AMBIGUOUS

        for seq, pos in deletions(bc.original, self.nts):
            current = table.get(seq, UNASSIGNED)
            if current.state is State.unassigned:
                table[seq] = Outcome.owned_by(bc.id)

            elif current.state is State.owned:
                # any owner, this barcode included: a deletion candidate that
                # coincides with one of its own neighbors is ambiguous, too
                table[seq] = AMBIGUOUS

    def lookup(self, seq):
        return self.table.get(seq, UNASSIGNED)

    def __contains__(self, seq):
        return seq in self.table

    def __len__(self):
        return len(self.table)

    def stats(self):
        counts = Counter([outcome.state for outcome in self.table.values()])
        return dict([(state.value, counts[state]) for state in State if state is not State.unassigned])
