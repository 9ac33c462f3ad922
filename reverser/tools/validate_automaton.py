"""validate-automaton
=====================

Check the structure of automata stored as JSON::

   reverser validate-automaton dfa1.json dfa2.json

The output is a tab-separated table with one row per file:

.. csv-table::
   :header: "column", "description"

   "filename", "the input file"
   "states", "number of states, empty if invalid"
   "transitions", "number of transitions, empty if invalid"
   "complete", "'yes' if every state has a transition for every symbol"
   "status", "'ok' or the reason the automaton is invalid"

"""

import sys
import cgatcore.experiment as E
import cgatcore.iotools as IOTools

from reverser.automata import load_automaton, is_complete, AutomatonError


def main(argv=None):

    parser = E.OptionParser(version="%prog version: $Id$",
                            usage=globals()["__doc__"])

    (options, args) = E.start(parser, argv=argv)

    counter = E.Counter()
    options.stdout.write("filename\tstates\ttransitions\tcomplete\tstatus\n")
    for filename in args:
        with IOTools.open_file(filename) as inf:
            try:
                automaton = load_automaton(inf)
            except AutomatonError as ex:
                E.warn("{}: {}".format(filename, ex))
                counter.invalid += 1
                options.stdout.write("{}\t\t\t\t{}\n".format(filename, ex))
                continue
        counter.valid += 1
        options.stdout.write("{}\t{}\t{}\t{}\tok\n".format(
            filename,
            len(automaton["states"]),
            len(automaton["transitions"]),
            "yes" if is_complete(automaton) else "no"))

    E.info("automata: {}".format(counter))
    E.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
