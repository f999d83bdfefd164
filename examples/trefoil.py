"""
Example: Trefoil.

Three crossings. Prints the size of every degree of the cube and how many
resolutions merge or split along each edge.
"""

from collections import Counter

from khcube import PlanarDiagram, ResolutionCube, build_complex, ComplexConfig, is_chain_complex
from khcube.topology.cube import Surgery


def main():
    trefoil = PlanarDiagram.from_pd_code([[1, 5, 2, 4], [3, 1, 4, 6], [5, 3, 6, 2]])

    cube = ResolutionCube.build(trefoil)
    print(f"{cube}")
    for r in range(len(cube)):
        circles = ", ".join(str(c) for c in cube.circles[r])
        print(f"  resolution {r:03b}: {circles}")

    counts = Counter(edge.surgery for edge in cube.edges())
    print(f"\nMerges: {counts[Surgery.MERGE]}, splits: {counts[Surgery.SPLIT]}")

    for config in (ComplexConfig(), ComplexConfig(reduced=True)):
        result = build_complex(trefoil, config)
        print(f"\n{config.variant}: dimensions {list(result.dimensions)}")
        print(f"  d^2 = 0: {is_chain_complex(result.maps)}")


if __name__ == "__main__":
    main()
