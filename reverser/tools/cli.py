"""reverser command line entry point.

``reverser <command> [options]`` runs the tool module ``<command>`` in
this package. Without a command, the list of commands is printed.
"""

import os
import sys
import glob
import inspect
import re
import importlib

import cgatcore.experiment as E
from cgatcore.iotools import snip

IGNORE = ["__init__.py", "cli.py"]
SYNONYMS = {"revert-alphabet": ["run"]}


def collect_commands():
    """return a dictionary mapping command names to main functions."""
    modules = []
    for module in glob.glob(os.path.join(os.path.dirname(__file__), "*.py")):
        if os.path.basename(module) in IGNORE:
            continue
        mod = "reverser.tools.{}".format(snip(os.path.basename(module), ".py"))
        modules.append(importlib.import_module(mod))

    script_dict = {}
    for module in modules:
        try:
            f = [y for (x, y) in inspect.getmembers(module) if x == "main"][0]
        except IndexError:
            continue
        name = re.sub("_", "-", module.__name__.split(".")[-1])
        script_dict[name] = f
        for synonym in SYNONYMS.get(name, []):
            script_dict[synonym] = f
    return script_dict


def main(argv=None):

    if argv is None:
        argv = sys.argv

    script_dict = collect_commands()

    if len(argv) == 1:
        print('\n'.join(sorted(script_dict.keys())))
        return 0

    command_key = argv[1]
    command_args = argv[1:]

    if command_key not in script_dict:
        E.error("unknown command {!r}, choose from: {}".format(
            command_key, ", ".join(sorted(script_dict.keys()))))
        raise KeyError(command_key)

    command = script_dict[command_key]
    try:
        return command(command_args)
    except Exception:
        print('When running {!r}'.format(command_key))
        raise


if __name__ == '__main__':
    sys.exit(main(sys.argv[:]))
