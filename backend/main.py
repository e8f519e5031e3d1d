"""Demo: simply supported and two-span CLT floor strips — reactions + sampled diagrams."""

from beam_analysis import (
    Beam,
    BeamAnalysis,
    Condition,
    Layer,
    Layup,
    Material,
    sample_diagram,
)


def print_table(series) -> None:
    """Print a sampled diagram every metre, plus its extreme value."""
    print(f"\n--- {series.axis_title} ---")
    print(f"{'x (m)':>8} {'value':>12}")
    for p in series.points():
        if p.y is not None and abs(p.x - round(p.x)) < 1e-9:
            print(f"{p.x:>8.2f} {p.y:>12.3f}")
    peak = series.extreme()
    if peak is not None:
        print(f"max |value| = {abs(peak.y):.3f} at x = {peak.x:.2f} m")


def main():
    # ── Section ───────────────────────────────────────────────────
    layup = Layup(
        [
            Layer("L1", 40, "C24", 0),
            Layer("L2", 20, "C16", 90),
            Layer("L3", 40, "C24", 0),
            Layer("L4", 20, "C16", 90),
            Layer("L5", 40, "C24", 0),
        ]
    )
    print(layup)
    for band in layup.bands():
        print(f"  {band.layer.caption:<20} {band.layer.grain:<14} h={band.height:.1f}px")

    clt = Material("CLT 160 L5s", {"EI": 4_200.0, "GA": 8_500.0, "j2": 1.0})  # per metre width
    ba = BeamAnalysis()

    # ── Simply supported ──────────────────────────────────────────
    ss = Beam(primary_span=4.0, secondary_span=0.0, material=clt)
    moment = ba.get_bending_moment(ss, 10.0, Condition.SIMPLY_SUPPORTED)
    moment.print_reactions()
    for get in (ba.get_deflection, ba.get_bending_moment, ba.get_shear_force):
        print_table(sample_diagram(get(ss, 10.0, Condition.SIMPLY_SUPPORTED)))

    # ── Two unequal spans ─────────────────────────────────────────
    two = Beam(primary_span=5.0, secondary_span=3.0, material=clt)
    shear = ba.get_shear_force(two, 10.0, "two-span-unequal")
    shear.print_reactions()
    at_support = shear.equation(two.primary_span)
    print(
        f"Shear at interior support: {at_support.left.y:.3f} -> {at_support.right.y:.3f} kN"
        f" (jump {at_support.jump:.3f} kN)"
    )
    for get in (ba.get_deflection, ba.get_bending_moment, ba.get_shear_force):
        print_table(sample_diagram(get(two, 10.0, "two-span-unequal")))


if __name__ == "__main__":
    main()
