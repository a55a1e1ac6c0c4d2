from physics_demos.demos import OrbitalMotion, OrbitParams, OrbitInitial
from physics_demos.core.clock import run_for

sim = OrbitalMotion(OrbitParams(drag=0.0), OrbitInitial(altitude=2.0e6, speed=7200.0))
el = sim.elements
print("e", el.eccentricity, "perigee", el.perigee_radius, "apogee", el.apogee_radius, "T", el.period)

sim.start()
# one minute of wall clock, one simulated hour
run_for(sim, 60.0)

e_total = sim.history.column("e_total")
print("t", sim.time, "terminal", sim.terminal)
print("energy drift", abs(e_total[-1] - e_total[0]) / abs(e_total[0]))
print("trace points", len(sim.trace))
