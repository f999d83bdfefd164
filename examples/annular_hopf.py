"""
Example: Hopf link in the annulus.

The four bigon faces of the Hopf diagram are {1,2}, {2,3}, {3,4}, {4,1}.
Taking {4,1} as the unbounded face and putting the puncture in {2,3}, the
circles (1,4) and (2,3) go around the puncture. The complex splits by
annular grading into subcomplexes.
"""

from khcube import AnnularFaces, PlanarDiagram, ResolutionCube
from khcube import annular_differential_maps, annular_subcomplex_maps, is_chain_complex
from khcube.differential.annular import PunctureClassifier


def main():
    hopf = PlanarDiagram.from_pd_code([[1, 2, 3, 4], [3, 4, 1, 2]])
    faces = AnnularFaces.from_lists([[2, 3], [1, 2], [3, 4]])

    classifier = PunctureClassifier(faces)
    cube = ResolutionCube.build(hopf)
    print("Circles:")
    for r in range(len(cube)):
        for c in cube.circles[r]:
            kind = "essential" if classifier(c) else "trivial"
            print(f"  resolution {r:02b}: {c} {kind}")

    maps = annular_differential_maps(hopf, faces)
    print(f"\nFull complex: shapes {[M.shape for M in maps]}, d^2 = 0: {is_chain_complex(maps)}")

    for grading in (-2, 0, 2):
        sub = annular_subcomplex_maps(hopf, faces, grading)
        print(f"  grading {grading:+d}: shapes {[M.shape for M in sub]}")


if __name__ == "__main__":
    main()
