# examples/dipole_field_lines.py
from charge_sim import ChargeSystem, ChargedBody, TraceConfig

system = ChargeSystem(trace_config=TraceConfig(max_points=60, max_length=8.0, step_length=0.1))
system.add_body(ChargedBody(charge=+1.0, position=(-1.0, 0.0, 0.0), is_static=True))
system.add_body(ChargedBody(charge=-1.0, position=(+1.0, 0.0, 0.0), is_static=True))

for line in system.field_lines(count=8):
    direction = "out" if line.outward else "in"
    print(f"{direction:>3} n={len(line):3d} length={line.length:5.2f} "
          f"end=({line.end[0]:+.2f}, {line.end[1]:+.2f}, {line.end[2]:+.2f}) {line.reason.value}")

print()
for pos, e in system.field_grid(shape=(5, 5), spacing=1.0):
    print(f"E({pos[0]:+.1f}, {pos[2]:+.1f}) = ({e[0]:+9.2f}, {e[2]:+9.2f})")
