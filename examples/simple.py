from argkit import ParserConfig, parse
from argkit.parser import ArgumentSpec

config = ParserConfig(
    flags=[
        ArgumentSpec(("-a",), action="store_true"),
        ArgumentSpec(("-b",), nargs=1),
        ArgumentSpec(("-c", "--count"), action="count"),
    ],
)

print(parse(["-ab", "X", "-cc", "one", "two"], config))
# {'a': True, 'b': ['X'], 'count': 2, 'args': ['one', 'two']}
