import math

import numpy as np

from physics_demos.demos import TwoBodyCollision, CollisionParams, CollisionInitial

m1, m2 = 1.0, 2.0
params = CollisionParams(mass_a=m1, radius_a=0.2, mass_b=m2, radius_b=0.2, restitution=1.0)
initial = CollisionInitial(speed_a=3.0, heading_a=0.0, speed_b=1.0, heading_b=math.pi,
                           position_a=(-1.0, 0.0), position_b=(1.0, 0.0))
sim = TwoBodyCollision(params, initial)

p0 = np.array(sim.snapshot()["momentum"])
ke0 = sim.snapshot()["e_kin"]

sim.run(2.0)

snap = sim.snapshot()
p1 = np.array(snap["momentum"])
print("p0", p0, "p1", p1, "dp", p1 - p0)
print("ke0", ke0, "ke1", snap["e_kin"], "dke", snap["e_kin"] - ke0)
print("v_final a,b:", sim.state.a.velocity, sim.state.b.velocity, "collisions:", sim.collision_count)
