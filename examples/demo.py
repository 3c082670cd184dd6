#!/usr/bin/env python
"""Demo of every argument kind.

Try::

    python examples/demo.py --help
    python examples/demo.py -bs value INPUT --infinite 1 -2 3 -N 4 5 -m x -m y extra
"""

from argsmith import Parser

parser = Parser(description="custom description message", epilog="custom epilog message")
parser.add_argument("-h|--help", action="help", help="custom help option message")
parser.add_argument("REQUIRED", help="help of required positional argument", required=True)
parser.add_argument("-b", action="store_true")
parser.add_argument("-c", action="store_false", help="help of count option")
parser.add_argument("-s, --simple", help="help of simple option", required=True, metavar="argSimple")
parser.add_argument("-n --number", help="help of number", metavar="ARG1 ARG2", nargs=2, default=["foo", "bar"])
parser.add_argument("--infinite", help="help of infinite", nargs="+")
parser.add_argument("--infinites", action="extend", help="help of infinites")
parser.add_argument("-m --multi", action="append", help="help of multi", metavar="MULTI", default=["0", "1", "2"])
parser.add_argument(
    "-N",
    action="append",
    help="help of multi number",
    metavar="MULTI NUMBER",
    nargs=2,
    default=["0", "1", "2", "2", "1", "0"],
)


def main():
    result = parser()

    print(parser.dump(), end="")
    print("-b:", parser["-b"])
    print("-c:", parser["-c"].count)
    print("REQUIRED:", parser["REQUIRED"])
    if parser["-s"]:
        print("-s:", parser["-s"])
    print(f"-n: [0]: {parser['-n'][0]}, [1]: {parser['-n'][1]} ({parser['-n']})")
    if parser["--infinite"]:
        for value in parser["--infinite"].convert(int):
            print(value)
    print("-m:", parser["-m"])
    for first, _ in parser["-N"].tuples:
        print(first)
    if result.overflow:
        print("additional arguments:", " ".join(result.overflow))


if __name__ == "__main__":
    main()
