from pytreegen import RandomSource, bamboo, random_tree, star

rng = RandomSource(7)

spine = bamboo(4)
hub = star(5)

linked = spine.link(3, hub, 0)
print("link:", linked.n, "vertices", linked.edges)

glued = spine.glue(3, hub, 0)
print("glue:", glued.n, "vertices", glued.edges)

shuffled = random_tree(10, rng=rng).shuffled(rng=rng)
print("shuffled random tree:", shuffled.edges)
print("parents from 0:", shuffled.parents(0).tolist())
