"""definitions_demo.py"""
import json
import sys

from argkit import Err, Exit, Ok, load_definitions, try_parse

DEFINITIONS = """
{
    "prog": "copy",
    "description": "Copy files somewhere else.",
    "flags": [
        {"flags": ["-v", "--verbose"], "action": "count", "help": "More output."},
        {"flags": ["-j", "--jobs"], "convert": "int", "default": 1},
        {"flags": ["--mode"], "choices": ["fast", "safe"], "default": "safe"},
        {"flags": ["--version"], "action": "version", "version": "copy 0.1"}
    ],
    "positionals": [
        {"flags": "sources", "nargs": "+", "convert": "path", "each": true},
        {"flags": "dest", "convert": "path"}
    ]
}
"""

config = load_definitions(json.loads(DEFINITIONS))

if __name__ == "__main__":
    match try_parse(sys.argv[1:], config):
        case Ok(values):
            print(values)
        case Err(kind, message):
            print(f"{kind}: {message}", file=sys.stderr)
            sys.exit(2)
        case Exit(message):
            print(message)
