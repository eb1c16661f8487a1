"""
Edit distance 1 neighborhood (aka "hull") of a cell barcode.

Two kinds of sequencing errors are considered:

    * substitutions: one base is read as a different nucleotide
    * deletions: one base is lost. All downstream bases shift one position
      to the left and the first base following the barcode (the first UMI
      base in Drop-seq reads) is shifted in at the end. Its identity is
      unknown, so every nucleotide is tried.

Candidates are yielded as (sequence, position) tuples, where position is
the 0-based position that was substituted or deleted.
"""
from itertools import chain

NUCLEOTIDES = "ACGT"


def substitutions(barcode, nts=NUCLEOTIDES):
    for i, orig in enumerate(barcode):
        head = barcode[:i]
        tail = barcode[i + 1:]
        for nt in nts:
            # skip replacement with the original itself
            if nt == orig:
                continue

            yield head + nt + tail, i


def deletions(barcode, nts=NUCLEOTIDES):
    # deleting the last base only shortens the barcode. The shifted-in
    # base makes that indistinguishable from a substitution of the last base.
    for i in range(len(barcode) - 1):
        shifted = barcode[:i] + barcode[i + 1:]
        for nt in nts:
            yield shifted + nt, i


def hull(barcode, nts=NUCLEOTIDES):
    return chain(substitutions(barcode, nts), deletions(barcode, nts))


def n_substitutions(barcode_length, nts=NUCLEOTIDES):
    return barcode_length * (len(nts) - 1)


def n_deletions(barcode_length, nts=NUCLEOTIDES):
    return max(barcode_length - 1, 0) * len(nts)
