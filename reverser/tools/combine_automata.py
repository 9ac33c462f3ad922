"""combine-automata
===================

Combine two automata with a product construction and output the
result as JSON::

   reverser combine-automata --operation=union dfa1.json dfa2.json

Operations are:

union
   words accepted by either automaton.
intersection
   words accepted by both automata.
difference
   words accepted by the first and rejected by the second automaton.

Both automata are completed over the union of their alphabets before
the product is built. Only reachable state pairs are output.

"""

import sys
import json
import cgatcore.experiment as E
import cgatcore.iotools as IOTools

from reverser.automata import load_automaton, OPERATIONS


def main(argv=None):

    parser = E.OptionParser(version="%prog version: $Id$",
                            usage=globals()["__doc__"])

    parser.add_option(
        "--operation", dest="operation", type="choice",
        choices=sorted(OPERATIONS.keys()),
        help="operation to apply [%default]")

    parser.set_defaults(operation="union")

    (options, args) = E.start(parser, argv=argv)

    if len(args) != 2:
        raise ValueError(
            "expected two automaton files, got {}".format(len(args)))

    automata = []
    for filename in args:
        with IOTools.open_file(filename) as inf:
            automata.append(load_automaton(inf))

    result = OPERATIONS[options.operation](*automata)
    E.info("{}: {} states, {} accepting".format(
        options.operation, len(result["states"]), len(result["acceptStates"])))

    options.stdout.write(json.dumps(result, indent=2, ensure_ascii=False) + "\n")

    E.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
