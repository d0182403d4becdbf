"""CLI entry point for the SOLID walkthrough.

Usage:
    solid-demo                          # No-op, like an empty program entry point
    solid-demo --run                    # Walk through every corrected design
    solid-demo --run lsp dip            # Only the named principles
    solid-demo --run isp --violations   # Also exercise the "before" designs
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from solid_demo.config import DemoSettings, Principle
from solid_demo.dip import after as dip_after
from solid_demo.dip import before as dip_before
from solid_demo.isp import after as isp_after
from solid_demo.isp import before as isp_before
from solid_demo.lsp import after as lsp_after
from solid_demo.lsp import before as lsp_before
from solid_demo.ocp import after as ocp_after
from solid_demo.ocp import before as ocp_before
from solid_demo.srp import after as srp_after
from solid_demo.srp import before as srp_before


def run_srp() -> None:
    srp_after.ReportGenerator().generate_reports()
    srp_after.ReportSaver().save_into_file()
    print("Report generated and saved by separate classes.")


def run_srp_violation() -> None:
    report = srp_before.Report()
    report.generate_reports()
    report.save_into_file()
    print("Report generated and saved by the same class.")


def run_ocp() -> None:
    for shape in (ocp_after.Rectangle(width=3, height=4), ocp_after.Circle(radius=2)):
        print(f"{shape}: area {ocp_after.compute_area(shape):.3f}")


def run_ocp_violation() -> None:
    rectangle = ocp_before.Rectangle(width=3, height=4)
    print(f"{rectangle}: area {ocp_before.AreaCalculator().calculate_area(rectangle):.3f}")


def run_lsp() -> None:
    for flyer in (lsp_after.Bird(), lsp_after.Penguin()):
        flyer.fly()


def run_lsp_violation() -> None:
    for bird in (lsp_before.Bird(), lsp_before.Penguin()):
        bird.fly()


def run_isp() -> None:
    manager = isp_after.Manager()
    manager.work()
    manager.eat()
    isp_after.Robot().work()


def run_isp_violation() -> None:
    for worker in (isp_before.Manager(), isp_before.Robot()):
        worker.work()
        worker.eat()


def run_dip() -> None:
    dip_after.Switch(dip_after.LightBulb()).toggle()


def run_dip_violation() -> None:
    dip_before.Switch(dip_before.LightBulb()).toggle()


WALKTHROUGHS: dict[Principle, tuple[Callable[[], None], Callable[[], None]]] = {
    Principle.SRP: (run_srp, run_srp_violation),
    Principle.OCP: (run_ocp, run_ocp_violation),
    Principle.LSP: (run_lsp, run_lsp_violation),
    Principle.ISP: (run_isp, run_isp_violation),
    Principle.DIP: (run_dip, run_dip_violation),
}


def run_walkthrough(principles: list[Principle], show_violations: bool = False) -> None:
    """Print the status lines of each selected example.

    Args:
        principles: Principles to demonstrate, in order.
        show_violations: Also run the "before" design. NotImplementedError raised
            there is reported as a `  ! <message>` line.
    """
    for principle in principles:
        fixed, violation = WALKTHROUGHS[principle]
        print(f"== {principle.name} ==")
        if show_violations:
            print("-- before --")
            try:
                violation()
            except NotImplementedError as e:
                print(f"  ! {e}")
            print("-- after --")
        fixed()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="solid-demo",
        description="SOLID Demo - before/after examples of the five SOLID principles",
    )
    parser.add_argument(
        "--run",
        nargs="*",
        choices=[p.value for p in Principle],
        metavar="PRINCIPLE",
        help="Walk through the named principles (default: all configured)",
    )
    parser.add_argument(
        "--violations",
        action="store_true",
        default=None,
        help="Also exercise the violating designs",
    )

    args = parser.parse_args(argv)
    if args.violations and args.run is None:
        parser.error("--violations requires --run")
    if args.run is None:
        return 0

    settings = DemoSettings()
    principles = [Principle(name) for name in args.run] or settings.principles
    show_violations = settings.show_violations if args.violations is None else args.violations
    run_walkthrough(principles, show_violations)
    return 0


if __name__ == "__main__":
    sys.exit(main())
