from __future__ import annotations

import nbxsort
from nbxsort import bench, rng, sort, sorter, utils


def main() -> None:
    assert nbxsort is not None
    assert bench is not None
    assert rng is not None
    assert sort is not None
    assert sorter is not None
    assert utils is not None


def test_imports() -> None:
    main()


if __name__ == "__main__":
    main()
