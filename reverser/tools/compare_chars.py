#!/usr/bin/env python

"""compare-chars
================

Compare character counts of a string and its reversal::

   reverser compare-chars input.txt reversed.txt

A reversal keeps every character, so each count should agree. The
output is a tab-separated table with one row per character, sorted:

.. csv-table::
   :header: "column", "description"

   "key", "the character"
   "input", "number of occurrences in the input"
   "reversed", "number of occurrences in the reversed string"
   "status", "'ok' if the counts agree, 'mismatch' otherwise"

"""

import sys
from collections import Counter
import cgatcore.experiment as E
import cgatcore.iotools as IOTools

from reverser.toolkit import read_stripped


def main(argv=None):

    parser = E.OptionParser(version="%prog version: $Id$",
                            usage=globals()["__doc__"])

    (options, args) = E.start(parser, argv=argv)

    if len(args) != 2:
        raise ValueError(
            "expected two files (input and reversed), got {}".format(len(args)))

    with IOTools.open_file(args[0]) as inf:
        data = read_stripped(inf)
    with IOTools.open_file(args[1]) as inf:
        reversed_data = read_stripped(inf)

    data_counts = Counter(data)
    reversed_counts = Counter(reversed_data)

    keys = set(list(data_counts.keys()) + list(reversed_counts.keys()))

    counter = E.Counter()
    options.stdout.write("key\tinput\treversed\tstatus\n")
    for key in sorted(keys):
        if data_counts[key] == reversed_counts[key]:
            status = "ok"
            counter.ok += 1
        else:
            status = "mismatch"
            counter.mismatch += 1
            E.warn("count mismatch for {!r}: {} != {}".format(
                key, data_counts[key], reversed_counts[key]))
        options.stdout.write(
            "\t".join((key,
                       str(data_counts[key]),
                       str(reversed_counts[key]),
                       status)) + "\n")

    E.info("characters: {}".format(counter))
    E.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
