import logging

from physics_demos.io import params_from_dict, initial_from_dict
from physics_demos.demos import InclinedBlock
from physics_demos.renderer import DebugRenderer

logging.basicConfig(level=logging.INFO)

params = params_from_dict("incline", {"mass": 2.0, "angle_deg": 35, "mu_static": 0.5, "mu_kinetic": 0.3,
                                      "applied_force": 25.0})
sim = InclinedBlock(params, initial_from_dict("incline", {"position": 0.5}))
renderer = DebugRenderer(fields=("position", "velocity", "acceleration", "is_static", "friction_force"))

sim.start()
while sim.running:
    sim.tick(1 / 60)
    renderer.render(sim)

print("transitions:", sim.transitions)
print("work by pull", sim.state.external_work, "lost to friction", sim.state.friction_work)
