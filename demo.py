"""
Demonstration of cyclotomic integers and their Galois conjugates.

Prints a short sample session and, optionally, renders the figures of the
sample values.
"""

import argparse
import os

from cyclotomic_integer import CyclotomicInteger
from cyclotomic_embeddings import house, norm
from number_theory import euler_phi, unit_group


def sample_values():
    """Return the named sample values shown by the demonstration."""
    return {
        "a": CyclotomicInteger.from_sparse({0: 263, 3: -12748}, 10),
        "i_Q4": CyclotomicInteger.from_dense([0, 1, 0, 0]),
        "i_Q8": CyclotomicInteger.from_dense([0, 0, 1, 0, 0, 0, 0, 0]),
    }


def describe_level(level):
    """Print the unit group of the level and the conjugates of its root of unity."""
    zeta = CyclotomicInteger.from_sparse({1 % level: 1}, level)
    print(f"\nLevel {level}: euler_phi = {euler_phi(level)}, units = {unit_group(level)}")
    for c in zeta.conjugates():
        print(f"  {c}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Cyclotomic integers and their Galois conjugates")
    parser.add_argument("--level", type=int, default=None,
                        help="also list the conjugates of the root of unity of this level")
    parser.add_argument("--figures", default=None,
                        help="render the figures of the sample values into this directory")
    args = parser.parse_args(argv)

    if args.level is not None and args.level < 1:
        parser.error(f"--level must be a positive integer, got {args.level}")

    print(f"euler_phi(420) = {euler_phi(420)}")

    values = sample_values()
    a = values["a"]
    print(f"a = {a}")
    print(f"support(a) = {a.support()}")

    for name in ("i_Q4", "i_Q8"):
        x = values[name]
        conjugates = x.conjugates()
        print(f"conjugates({name}) = {conjugates}")
        print(f"  {len(conjugates)} of euler_phi({x.level()}) = {euler_phi(x.level())}, "
              f"house = {house(x):.6f}, norm = {norm(x)}")

    if args.level is not None:
        describe_level(args.level)

    if args.figures is not None:
        # Imported here so the plain session does not need a plotting backend
        from cyclotomic_visualization import CyclotomicVisualizer

        visualizer = CyclotomicVisualizer(output_dir=args.figures)
        for name, x in values.items():
            try:
                visualizer.create_full_analysis(x, filename=f"{name}_analysis.pdf")
            except Exception as e:
                print(f"Error rendering {name}: {str(e)}")

        print(f"\nOutput files saved to: {os.path.abspath(args.figures)}")
        for filename in sorted(os.listdir(args.figures)):
            print(f"  - {filename}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
