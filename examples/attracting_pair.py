from charge_sim import ChargeSystem, ChargedBody, ForceConfig
import numpy as np

system = ChargeSystem(force_config=ForceConfig(k=1.0, min_distance=0.5), dt=1/50, drag_c=0.5)

a = ChargedBody(charge=+1.0, mass=1.0, position=(0.0, 0.0, 0.0), name="A")
b = ChargedBody(charge=-1.0, mass=1.0, position=(2.0, 0.0, 0.0), name="B")
system.add_body(a); system.add_body(b)

forces = system.tick()
print("F on A:", forces[a.id], "F on B:", forces[b.id])

for _ in range(200):
    system.step()

print("t:", system.time)
print("separation:", float(np.linalg.norm(b.position - a.position)))
