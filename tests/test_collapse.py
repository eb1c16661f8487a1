import pytest
from cbremap.collapse import collapse, coherent_partners
from cbremap.lookup import Outcome, AMBIGUOUS

from fixtures import build


def test_pair():
    barcodes, lookup = build("AAAAAAAAAAAA", "AAAAAAAAAAAC")
    pairs = list(collapse(barcodes))
    assert pairs == [
        ("AAAAAAAAAAAA", "AAAAAAAAAAAN"),
        ("AAAAAAAAAAAC", "AAAAAAAAAAAN"),
    ]
    assert [bc.seq for bc in barcodes] == ["AAAAAAAAAAAN", "AAAAAAAAAAAN"]
    assert [bc.original for bc in barcodes] == ["AAAAAAAAAAAA", "AAAAAAAAAAAC"]
    assert barcodes.n_with_hits() == 0


def test_lookup_untouched():
    barcodes, lookup = build("AAAAAAAAAAAA", "AAAAAAAAAAAC", "ACGTACGTACGT")
    before = dict(lookup.table)
    list(collapse(barcodes))

    assert lookup.table == before
    assert "AAAAAAAAAAAN" not in lookup
    assert lookup.lookup("AAAAAAAAAAAA") == Outcome.blocked_by(1)
    assert lookup.lookup("AAAAAAAAAAAG") == AMBIGUOUS


def test_group_of_three():
    barcodes, lookup = build("AAAAAAAAAAAA", "AAAAAAAAAAAC", "AAAAAAAAAAAG")
    pairs = list(collapse(barcodes))
    # the barcode first, then its partners, most recent hit first
    assert pairs == [
        ("AAAAAAAAAAAA", "AAAAAAAAAAAN"),
        ("AAAAAAAAAAAG", "AAAAAAAAAAAN"),
        ("AAAAAAAAAAAC", "AAAAAAAAAAAN"),
    ]


def test_chain_is_not_collapsed():
    # 1 - 2 differ at pos 11, 2 - 3 at pos 10: hit counts 1, 2, 1
    barcodes, lookup = build("AAAAAAAAAAAA", "AAAAAAAAAAAC", "AAAAAAAAAACC")
    assert [len(bc.hits) for bc in barcodes] == [1, 2, 1]
    assert coherent_partners(barcodes[1], barcodes) is None
    assert coherent_partners(barcodes[2], barcodes) is None

    assert list(collapse(barcodes)) == []
    assert [bc.seq for bc in barcodes] == [bc.original for bc in barcodes]
    # unresolved hits are kept
    assert [len(bc.hits) for bc in barcodes] == [1, 2, 1]


def test_idempotent():
    barcodes, lookup = build("AAAAAAAAAAAA", "AAAAAAAAAAAC", "ACGTACGTACGT")
    assert len(list(collapse(barcodes))) == 2
    assert list(collapse(barcodes)) == []
    assert [bc.seq for bc in barcodes] == ["AAAAAAAAAAAN", "AAAAAAAAAAAN", "ACGTACGTACGT"]


def test_no_hits():
    barcodes, lookup = build("ACGTACGTACGT", "TTGCATGCAAGC")
    assert list(collapse(barcodes)) == []


def test_custom_wildcard():
    barcodes, lookup = build("ACGTACGTACGT", "ACGTACCTACGT")
    assert list(collapse(barcodes, wildcard="X")) == [
        ("ACGTACGTACGT", "ACGTACXTACGT"),
        ("ACGTACCTACGT", "ACGTACXTACGT"),
    ]


def test_square_with_mixed_positions():
    # Equal hit counts are taken as a coherent group even though the hits
    # are at different positions (10 and 11). The 4th barcode is left over.
    barcodes, lookup = build(
        "AAAAAAAAAAAA", "AAAAAAAAAAAC", "AAAAAAAAAACA", "AAAAAAAAAACC"
    )
    assert [len(bc.hits) for bc in barcodes] == [2, 2, 2, 2]
    assert barcodes[1].hits == [(3, 10), (2, 11)]

    pairs = list(collapse(barcodes))
    assert pairs == [
        ("AAAAAAAAAAAA", "AAAAAAAAAANA"),
        ("AAAAAAAAAACA", "AAAAAAAAAANA"),
        ("AAAAAAAAAAAC", "AAAAAAAAAAAN"),
    ]
    assert barcodes[4].seq == "AAAAAAAAAACC"
    assert barcodes[4].hits == [(3, 11), (2, 10)]
