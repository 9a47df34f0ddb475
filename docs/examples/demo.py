import os
import pyidioms


def demo_contains():
    print("--- CONTAINMENT DEMO ---")
    squares = [1, 4, 9, 16]
    if pyidioms.contains(squares, 16):
        print("16 is a perfect square.")

    primes = [2, 3, 5, 7, 11, 13, 0, 0]
    if pyidioms.contains(primes, 11, size=6):
        print("11 is a prime number.")

    age = {"siwei": 21, "grace": 16}
    if pyidioms.contains_key(age, "siwei"):
        print("siwei is a registered name.")

    if not pyidioms.contains({"siwei", "grace"}, "yolanda"):
        print("yolanda is not contained.")


def demo_enumerate():
    print("\n--- ENUMERATE DEMO ---")
    words = ["iterate", "over", "this", "with", "the", "index"]
    print("Original list:\n\t", end="")
    pyidioms.print_range(words)
    print("Start at 7:\n\t", end="")
    pyidioms.print_range(pyidioms.enumerate(words, 7))
    print("Default start:\n\t", end="")
    pyidioms.print_range(pyidioms.enumerate(words))


def demo_io():
    print("\n--- IO DEMO ---")
    args = pyidioms.argparse(["demo", "-42", "47", "-35", "12"], int)
    print("Command line args: ", end="")
    pyidioms.print_range(args)

    filename = os.path.join(os.path.dirname(pyidioms.__file__), "iohelpers.py")
    counts = {mode: pyidioms.wc(filename, mode)
              for mode in ('char', 'word', 'line')}
    print("Stats for iohelpers.py:\n\t", end="")
    pyidioms.print_range(counts.items())


def demo_product():
    print("\n--- PRODUCT DEMO ---")
    print('"abc" x "123":\n\t', end="")
    pyidioms.print_range(pyidioms.product("abc", "123"))
    print('"123" x "abc":\n\t', end="")
    pyidioms.print_range(pyidioms.product("123", "abc"))


def demo_range():
    print("\n--- RANGE DEMO ---")
    for args in [(10,), (-7,), (-5, 4), (4, -5)]:
        print("range{}: ".format(args).replace(",)", ")"), end="")
        pyidioms.print_range(pyidioms.range(*args))


def demo_sequence():
    print("\n--- SEQUENCE DEMO ---")
    nums = list(range(10))
    print("nums[-1:2:-2]: ", end="")
    pyidioms.print_range(pyidioms.slice(nums, -1, 2, -2))
    print("nums[3:8:2]: ", end="")
    pyidioms.print_range(pyidioms.slice(nums, 3, 8, 2))

    tokens = pyidioms.split("watch_dogs_2", "_")
    print("After splitting on underscore: ", end="")
    pyidioms.print_range(tokens)
    print("After rejoining with double star:", pyidioms.join(tokens, "**"))
    print("Splitting &*watch&*dogs&*2&* on &*: ", end="")
    pyidioms.print_range(pyidioms.split("&*watch&*dogs&*2&*", "&*"))


def demo_zip():
    print("\n--- ZIP DEMO ---")
    digits = [8, 6, 7, 5, 3, 0, 9]
    text = "yay zippers"
    print("Numbers then letters:\n\t", end="")
    pyidioms.print_range(pyidioms.zip(digits, text))
    print("Letters then numbers:\n\t", end="")
    pyidioms.print_range(pyidioms.zip(text, digits))


if __name__ == "__main__":
    demo_contains()
    demo_enumerate()
    demo_io()
    demo_product()
    demo_range()
    demo_sequence()
    demo_zip()
