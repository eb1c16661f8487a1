"""
Collapse barcodes to use which are only one substitution apart.

Groups of such barcodes are treated as one logical barcode: the differing
position is replaced by a wildcard ('N') in the display sequence of every
member of the group. The lookup table is not touched, only the sequences
reported for the group members change.

A group is considered coherent if every partner of a barcode has exactly as
many hits as the barcode itself. This is a heuristic: it does not check that
all hits share the same mismatch position.
"""
import logging

logger = logging.getLogger("cbremap.collapse")


def coherent_partners(bc, barcodes):
    """
    Returns the partners of bc (most recent hit first) if the group is
    coherent, None otherwise.
    """
    n = len(bc.hits)
    partners = []
    for hit in bc.hits:
        partner = barcodes[hit.partner]
        if len(partner.hits) != n:
            logger.debug(
                f"not collapsing #{bc.id} {bc.original}: {n} hit(s), but partner "
                f"#{partner.id} {partner.original} has {len(partner.hits)}"
            )
            return None

        partners.append(partner)

    return partners


def collapse(barcodes, wildcard="N"):
    """
    Generator over (original, collapsed) display sequence pairs, in the order
    the collapses are found. Display sequences and hit records of the
    barcodes are modified in place. Hit records of collapsed barcodes are
    cleared, so collapsing the same set again yields nothing.
    """
    n_groups = 0
    n_collapsed = 0
    for bc in barcodes:
        if not bc.hits:
            continue

        partners = coherent_partners(bc, barcodes)
        if partners is None:
            continue

        yield bc.wildcard(bc.hits[0].pos, wildcard)
        for partner in partners:
            yield partner.wildcard(partner.hit_pos(bc.id), wildcard)
            partner.hits.clear()

        bc.hits.clear()
        n_groups += 1
        n_collapsed += 1 + len(partners)

    logger.info(f"collapsed {n_collapsed} barcodes to use in {n_groups} group(s)")
