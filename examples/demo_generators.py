from pytreegen import (
    RandomSource,
    bamboo,
    binary,
    caterpillar,
    random_kruskal,
    random_prim,
    random_tree,
    star,
)

rng = RandomSource(2024)

trees = {
    "bamboo": bamboo(8),
    "star": star(8),
    "binary": binary(8),
    "caterpillar": caterpillar(8, 3, rng=rng),
    "random": random_tree(8, rng=rng),
    "prim (long)": random_prim(8, elongation=4, rng=rng),
    "prim (short)": random_prim(8, elongation=-4, rng=rng),
    "kruskal": random_kruskal(8, rng=rng),
}

for name, tree in trees.items():
    print(f"{name:>13}: {tree.edges}")
    print(f"{'parents':>13}: {tree.parents(0).tolist()}")
