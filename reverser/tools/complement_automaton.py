"""complement-automaton
=======================

Output the complement of an automaton as JSON::

   reverser complement-automaton dfa.json > complement.json

An incomplete automaton is first completed with a sink state, then
accepting and non-accepting states are swapped.

"""

import sys
import json
import cgatcore.experiment as E
import cgatcore.iotools as IOTools

from reverser.automata import load_automaton, complement


def main(argv=None):

    parser = E.OptionParser(version="%prog version: $Id$",
                            usage=globals()["__doc__"])

    (options, args) = E.start(parser, argv=argv)

    if len(args) != 1:
        raise ValueError(
            "expected one automaton file, got {}".format(len(args)))

    with IOTools.open_file(args[0]) as inf:
        automaton = load_automaton(inf)

    result = complement(automaton)
    E.info("complement has {} states, {} accepting".format(
        len(result["states"]), len(result["acceptStates"])))

    options.stdout.write(json.dumps(result, indent=2, ensure_ascii=False) + "\n")

    E.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
