import errno
import os
import sys
import logging

from contextlib import contextmanager
from cbremap.errors import InputFileError
from cbremap.contrib import __version__

default_log_level = "INFO"


def ensure_path(path):
    dirname = os.path.dirname(path)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    return path


def timed_loop(
    src,
    logger,
    T=5,
    chunk_size=10000,
    template="processed {i} barcodes in {dT:.1f}sec. ({rate:.3f} k rec/sec)",
):
    from time import time

    t0 = time()
    t_last = t0
    i = 0
    for i, x in enumerate(src, start=1):
        yield x

        if i % chunk_size == 0:
            t = time()
            if t - t_last > T:
                dT = t - t0
                rate = i / dT / 1000.0
                logger.info(template.format(**locals()))
                t_last = t

    t = time()
    dT = max(t - t0, 1e-9)
    rate = i / dT / 1000.0
    logger.info("Finished! " + template.format(**locals()))


def assert_readable(file_path):
    if not isinstance(file_path, list):
        file_path = [file_path]

    for fp in file_path:
        if not os.path.exists(fp):
            raise InputFileError(fp, os.strerror(errno.ENOENT))

        if os.path.isdir(fp):
            raise InputFileError(fp, os.strerror(errno.EISDIR))

        if not os.access(fp, os.R_OK):
            raise InputFileError(fp, os.strerror(errno.EACCES))

    return True


def open_text(fname):
    """
    Open a plain text or gzip compressed (.gz) file for reading. Failing to open
    the file is reported as InputFileError.
    """
    import gzip

    try:
        if str(fname).endswith(".gz"):
            return gzip.open(fname, mode="rt", encoding="utf-8")
        else:
            return open(fname, "rt", encoding="utf-8")
    except OSError as err:
        raise InputFileError(fname, err.strerror or str(err))


def read_lines(fname):
    """
    Yields (line number, line) with the line terminator removed. Line numbers
    start at 1. Undecodable content (binary files, corrupt gzip data) is
    reported as InputFileError.
    """
    logger = logging.getLogger("cbremap.util.read_lines")
    logger.info(f"iterating over lines from '{fname}'")

    n = 0
    with open_text(fname) as src:
        try:
            for n, line in enumerate(src, start=1):
                yield n, line.rstrip("\r\n")
        except UnicodeDecodeError as err:
            raise InputFileError(fname, f"line {n + 1} is not valid text ({err.reason})")
        except (OSError, EOFError) as err:
            # e.g. truncated or corrupt gzip data
            raise InputFileError(fname, getattr(err, "strerror", None) or str(err))

    logger.info(f"read {n} lines from '{fname}'")


@contextmanager
def open_output(fname=None):
    """
    Output goes to stdout unless a filename other than '-' is given. stdout is
    flushed but never closed.
    """
    if not fname or fname == "-":
        yield sys.stdout
        sys.stdout.flush()
    else:
        with open(ensure_path(fname), "wt") as out:
            yield out


def setup_logging(
    args,
    name="cbremap.main",
    log_file="",
    FORMAT="%(asctime)-20s\t%(name)-30s\t%(levelname)s\t%(message)s",
):
    import setproctitle
    if name != "cbremap.main":
        setproctitle.setproctitle(name)

    log_level = getattr(args, "log_level", default_log_level)
    lvl = getattr(logging, log_level.upper())
    logging.basicConfig(level=lvl, format=FORMAT)
    root = logging.getLogger("cbremap")
    root.setLevel(lvl)

    log_file = getattr(args, "log_file", log_file)
    if log_file:
        fh = logging.FileHandler(filename=ensure_path(log_file), mode="a")
        fh.setFormatter(logging.Formatter(FORMAT))
        root.debug(f"adding log-file handler '{log_file}'")
        root.addHandler(fh)

    if getattr(args, "debug", ""):
        # cmdline requested debug output for specific domains (comma-separated)
        for logger_name in args.debug.split(","):
            if logger_name:
                root.info(f"setting domain {logger_name} to DEBUG")
                logging.getLogger(logger_name.replace("root", "")).setLevel(
                    logging.DEBUG
                )

    logger = logging.getLogger(name)
    logger.debug("started logging")
    for k, v in sorted(vars(args).items()):
        logger.debug(f"cmdline arg\t{k}={v}")

    return logger


def make_minimal_parser(prog="", usage=None, **kw):
    import argparse

    parser = argparse.ArgumentParser(prog=prog, usage=usage, **kw)
    parser.add_argument(
        "--log-file",
        default="",
        help="append log entries to this file (default=off, log to stderr only)",
    )
    parser.add_argument(
        "--log-level",
        default=default_log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"change threshold of python logging facility (default={default_log_level})",
    )
    parser.add_argument(
        "--debug",
        default="",
        help="comma-separated list of logging-domains for which you want DEBUG output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser
