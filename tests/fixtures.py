import pytest
import os
import sys

cbremap_dir = os.path.abspath(os.path.dirname(__file__) + "/../")
test_data = os.path.join(cbremap_dir, "test_data")

barcodes_use = os.path.join(test_data, "barcodes_use.txt")
barcodes_remap = os.path.join(test_data, "barcodes_remap.txt")
expected_output = os.path.join(test_data, "expected_output.tsv")


def sm(*argc, expect_fail=False):
    # construct the desired cmdline
    sys.argv = [
        "cbremap",
    ] + list(argc)

    from cbremap.cmdline import cmdline

    res = cmdline()
    if expect_fail:
        assert isinstance(res, Exception) == True
    else:
        assert isinstance(res, Exception) == False

    return res


def make_barcodes(*seqs, barcode_length=12):
    from cbremap.barcodes import BarcodeSet

    return BarcodeSet.from_iter(seqs, len(seqs), barcode_length=barcode_length)


def build(*seqs, **kw):
    from cbremap.lookup import BarcodeLookup

    barcodes = make_barcodes(*seqs, **kw)
    lookup = BarcodeLookup().build(barcodes)
    return barcodes, lookup


def write_lines(path, lines):
    path.write_text("".join([f"{line}\n" for line in lines]))
    return path.as_posix()


@pytest.fixture
def tmp_root(tmp_path_factory):
    tmp = tmp_path_factory.mktemp("root_blank")

    return tmp


@pytest.fixture(scope="session")
def gz_inputs(tmp_path_factory):
    import gzip

    tmp = tmp_path_factory.mktemp("gz_inputs")
    paths = []
    for fname in [barcodes_use, barcodes_remap]:
        gz_path = tmp / (os.path.basename(fname) + ".gz")
        with gzip.open(gz_path, "wt") as gz:
            gz.write(open(fname).read())

        paths.append(gz_path.as_posix())

    return paths
