"""Demo script: load CH4 from an XYZ file and list its perceived bonds."""

from pathlib import Path

from molgraph import Molecule

FIXTURES = Path(__file__).resolve().parent.parent / "tests" / "fixtures"


def main():
    molecule = Molecule.from_xyz(FIXTURES / "ch4.xyz")
    print(f"Loaded molecule: {len(molecule)} atoms, {len(molecule.bonds)} bond(s)")
    print(f"Species: {molecule.species}")
    centroid = molecule.centroid()
    print(f"Centroid: ({centroid.x:.3f}, {centroid.y:.3f}, {centroid.z:.3f})")

    for bond in molecule.sorted_bonds():
        a = molecule.atoms[bond.index_a]
        b = molecule.atoms[bond.index_b]
        print(
            f"{a.symbol}{bond.index_a}-{b.symbol}{bond.index_b}: "
            f"{molecule.bond_length(bond):.4f} angstrom"
        )


if __name__ == "__main__":
    main()
