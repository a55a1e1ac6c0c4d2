from physics_demos.demos import DampedPendulum, PendulumParams, PendulumInitial
from physics_demos.core.clock import run_for

params = PendulumParams(length=1.0, mass=1.0, beta=0.15, drive_amplitude=1.2, drive_frequency=0.6)
sim = DampedPendulum(params, PendulumInitial(theta=0.5, omega=0.0))
sim.start()

run_for(sim, 10.0)

snap = sim.snapshot()
print("t", round(sim.time, 3), "theta", snap["theta"], "omega", snap["omega"])
print("energies: kin", snap["e_kin"], "pot", snap["e_pot"], "total", snap["e_total"])
print("phase points kept:", len(sim.phase_points), "history samples:", len(sim.history))
