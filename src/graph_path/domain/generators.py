# graph_path/domain/generators.py
import numpy as np

from graph_path.domain.entities.geography import Graph, GraphNode, Point


def grid_graph(width: int, height: int, *, spacing: int = 1, first_id: int = 1) -> Graph:
    """4-connected grid; ids run row by row starting at first_id."""
    if width < 1 or height < 1:
        raise ValueError("grid needs width, height >= 1")

    def nid(i, j):
        return first_id + j * width + i

    nodes = []
    for j in range(height):
        for i in range(width):
            nbrs = []
            for di, dj in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                a, b = i + di, j + dj
                if 0 <= a < width and 0 <= b < height:
                    nbrs.append(nid(a, b))
            nodes.append(GraphNode(nid(i, j), Point(i * spacing, j * spacing), tuple(nbrs)))
    return Graph.with_nodes(nodes)


def random_geometric_graph(
    n: int,
    radius: float,
    *,
    rng: np.random.Generator,
    extent: int = 100,
    one_sided: float = 0.0,
) -> Graph:
    """
    n nodes at random integer coords in [0, extent)^2, linked when closer than
    radius. With one_sided > 0 that fraction of links is recorded on one end only.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    xy = rng.integers(0, extent, size=(n, 2))
    diff = xy[:, None, :] - xy[None, :, :]
    d = np.hypot(diff[..., 0], diff[..., 1])
    close = (d <= radius) & ~np.eye(n, dtype=bool)

    links: list[list[int]] = [[] for _ in range(n)]
    for a, b in zip(*np.nonzero(np.triu(close)), strict=True):
        a, b = int(a), int(b)
        if one_sided and rng.random() < one_sided:
            # keep only one direction, chosen at random
            src, dst = (a, b) if rng.random() < 0.5 else (b, a)
            links[src].append(dst + 1)
        else:
            links[a].append(b + 1)
            links[b].append(a + 1)

    return Graph.with_nodes(
        GraphNode(i + 1, Point(int(xy[i, 0]), int(xy[i, 1])), tuple(links[i])) for i in range(n)
    )
