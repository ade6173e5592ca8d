import argparse
import sys
import os

current_script_directory = os.path.dirname(__file__)
project_root_directory = os.path.join(current_script_directory, '..')

if project_root_directory not in sys.path:
    sys.path.append(project_root_directory)

from src.stack import Stack, EmptyStackError
from src.utils import decode_values

def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description='Demonstration of a last-in-first-out stack')
    parser.add_argument('--values', type=str, nargs='+', default=['10', '20', '30'], help='Values to push onto the stack, bottom first.')
    parser.add_argument('--pop', type=int, default=1, help='Number of items to pop after pushing.')
    parser.add_argument('--reverse', action='store_true', help='Reverse the stack before popping.')
    return parser.parse_args(argv)

def run(argv=None):
    args = parse_arguments(argv)

    if args.pop < 0:
        print("Error: --pop must not be negative", file=sys.stderr)
        return 1

    stack = Stack()
    print(repr(stack))

    for value in decode_values(args.values):
        stack.push(value)

    if args.reverse:
        stack.reverse()
    print(repr(stack))

    try:
        for _ in range(args.pop):
            stack.pop()
    except EmptyStackError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(repr(stack))
    print(stack.render())

    return 0

if __name__ == '__main__':
    sys.exit(run())
