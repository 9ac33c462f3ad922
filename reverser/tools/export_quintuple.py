"""export-quintuple
===================

Write the formal quintuple M = (Q, Σ, δ, q0, F) of an automaton as
text::

   reverser export-quintuple dfa.json > dfa_quintuple.txt

"""

import sys
import cgatcore.experiment as E
import cgatcore.iotools as IOTools

from reverser.automata import load_automaton, format_quintuple


def main(argv=None):

    parser = E.OptionParser(version="%prog version: $Id$",
                            usage=globals()["__doc__"])

    (options, args) = E.start(parser, argv=argv)

    if len(args) != 1:
        raise ValueError(
            "expected one automaton file, got {}".format(len(args)))

    with IOTools.open_file(args[0]) as inf:
        automaton = load_automaton(inf)

    options.stdout.write(format_quintuple(automaton))

    E.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
