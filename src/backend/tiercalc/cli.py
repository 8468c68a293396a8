"""`tiercalc` command: one input mode per invocation, text report on stdout.

    tiercalc --cpu 24
    tiercalc --mem 6G
    tiercalc -t db-custom-4-15360
    tiercalc --bump-mem db-custom-4-3840
    tiercalc --check-downgrade db-custom-8-53248 db-custom-8-32000
    tiercalc --downgrade db-custom-8-53248

Exit status: 0 on success, 1 on malformed input, 2 on usage errors (argparse).
"""

import argparse
import logging
import sys

from tiercalc.config import settings
from tiercalc.errors import TierCalcError
from tiercalc.models.tier import (
    BumpRelation,
    BumpResult,
    DowngradeReport,
    DowngradeSuggestion,
    NextTierResult,
    Recommendation,
    Tier,
)
from tiercalc.services.calculator_service import (
    bump_memory_to_max,
    check_downgrade,
    next_tier,
    recommend_from_cpu,
    recommend_from_memory,
    suggest_downgrade,
)
from tiercalc.services.constraints import MAX_GB_PER_VCPU
from tiercalc.services.identifier import format_tier, parse_memory, parse_tier

log = logging.getLogger(__name__)

_VALID_RANGE = "valid range: 0.9-6.5 GB"


def _gb(memory_mb: float) -> str:
    return f"{memory_mb / 1024:.2f} GB"


def _summary(tier: Tier) -> str:
    return f"{format_tier(tier)} ({tier.vcpu} vCPUs, {tier.memory_mb} MB, {_gb(tier.memory_mb)})"


def _with_ratio(tier: Tier) -> str:
    return (
        f"{tier.vcpu} vCPUs, {tier.memory_mb} MB ({_gb(tier.memory_mb)}) "
        f"[{tier.gb_per_vcpu:.2f} GB/vCPU]"
    )


# ── Renderers ──────────────────────────────────────────────────────────────────


def render_cpu_recommendation(result: Recommendation) -> list[str]:
    tier = result.tier
    lines = [] if result.valid else [f"Warning: {result.warning}"]
    lines += [
        f"Recommended custom tier for {tier.vcpu} vCPUs:",
        f"  - Memory: {tier.memory_mb} MB ({_gb(tier.memory_mb)})",
        f"  - Tier: {format_tier(tier)}",
        f"  - Memory per vCPU: {tier.gb_per_vcpu:.2f} GB ({_VALID_RANGE})",
    ]
    return lines


def render_memory_recommendation(result: Recommendation) -> list[str]:
    tier = result.tier
    lines = [] if result.valid else [f"Warning: {result.warning}"]
    lines += [
        f"Recommended custom tier for {tier.memory_mb} MB RAM:",
        f"  - vCPUs: {tier.vcpu}",
        f"  - Memory: {tier.memory_mb} MB ({_gb(tier.memory_mb)})",
        f"  - Tier: {format_tier(tier)}",
        f"  - Memory per vCPU: {tier.gb_per_vcpu:.2f} GB ({_VALID_RANGE})",
    ]
    return lines


def render_next_tier(result: NextTierResult) -> list[str]:
    current, tier = result.current, result.tier
    lines = [f"Parsed tier: CPUs={current.vcpu}, RAM={current.memory_mb} MB"]
    if result.already_valid:
        return lines + ["This is already a valid custom tier."]
    label = "Next known working custom tier" if result.source == "known" else "Next valid custom tier"
    return lines + [
        f"{label}: {format_tier(tier)}",
        f"  CPUs: {tier.vcpu}",
        f"  RAM: {tier.memory_mb} MB ({_gb(tier.memory_mb)})",
    ]


def render_bump(result: BumpResult) -> list[str]:
    name = format_tier(result.current)
    new = result.new_tier
    if result.relation is BumpRelation.ALREADY_MAX:
        return [
            f"Tier {name} is already at the maximum memory level of "
            f"{_gb(new.memory_mb)} ({MAX_GB_PER_VCPU} GB/vCPU)."
        ]
    if result.relation is BumpRelation.ALREADY_EXCEEDS_MAX:
        return [
            f"Tier {name} already exceeds the maximum standard memory.",
            f"  Current: {_with_ratio(result.current)}",
            f"  Max at {MAX_GB_PER_VCPU} GB/vCPU: {new.vcpu} vCPUs, {new.memory_mb} MB ({_gb(new.memory_mb)})",
        ]
    return [
        f"Bumping memory for tier {name}:",
        f"  Current: {_with_ratio(result.current)}",
        f"  New: {_with_ratio(new)}",
        f"  New Tier: {format_tier(new)}",
    ]


def render_downgrade_check(report: DowngradeReport) -> list[str]:
    current, recommended = report.current, report.recommended
    lines = [
        f"Checking downgrade from {format_tier(current)} to {format_tier(recommended)}:",
        f"  Current: {current.vcpu} vCPUs, {current.memory_mb} MB ({_gb(current.memory_mb)})"
        f" - Valid: {report.current_valid}",
        f"  Recommended: {recommended.vcpu} vCPUs, {recommended.memory_mb} MB"
        f" ({_gb(recommended.memory_mb)}) - Valid: {report.recommended_valid}",
    ]
    if report.is_valid_downgrade:
        return lines + ["  Valid downgrade: Yes"]

    lines.append("  Valid downgrade: No")
    if report.nearest_valid is not None:
        lines.append(f"  Nearest valid tier: {_summary(report.nearest_valid)}")
        if report.adjusted_is_lower:
            lines.append("  This adjusted tier is a valid downgrade.")
    if not report.is_lower:
        lines.append("  Recommended tier is not lower than the current tier.")
    if report.known_lower is not None:
        lines.append(f"  Suggested known lower tier: {_summary(report.known_lower)}")
    else:
        lines.append("  No lower tier found in known list.")
    return lines


def render_downgrade(result: DowngradeSuggestion) -> list[str]:
    current = result.current
    lines = [
        f"Current tier: {format_tier(current)}",
        f"  CPUs: {current.vcpu}, RAM: {current.memory_mb} MB ({_gb(current.memory_mb)})"
        f" - Valid: {result.current_valid}",
        f"  Memory per vCPU: {current.gb_per_vcpu:.2f} GB ({_VALID_RANGE})",
    ]
    if result.suggested is None:
        return lines + ["Already at the lowest known tier."]
    suggested = result.suggested
    return lines + [
        f"Suggested downgrade tier: {format_tier(suggested)}",
        f"  CPUs: {suggested.vcpu}, RAM: {suggested.memory_mb} MB ({_gb(suggested.memory_mb)})",
        f"  Memory per vCPU: {suggested.gb_per_vcpu:.2f} GB",
    ]


# ── Argument parsing and dispatch ──────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    prefix = settings.TIER_PREFIX
    parser = argparse.ArgumentParser(
        prog="tiercalc",
        description="Compute and validate custom database machine tiers.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log adjustments to stderr")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--cpu", type=int, help="Number of vCPUs (e.g. 24, 48, 64)")
    mode.add_argument("--mem", help="Memory (e.g. 6G, 6144M, 6144)")
    mode.add_argument("-t", "--tier", help=f"Custom tier string (e.g. {prefix}-1-3840)")
    mode.add_argument(
        "--bump-mem",
        metavar="TIER",
        help=f"Raise memory to the {MAX_GB_PER_VCPU} GB/vCPU maximum (e.g. {prefix}-4-3840)",
    )
    mode.add_argument(
        "--check-downgrade",
        nargs="+",
        metavar="TIER",
        help="Check if RECOMMENDED is a valid downgrade from CURRENT "
        "('CURRENT RECOMMENDED' or two arguments)",
    )
    mode.add_argument(
        "--downgrade",
        metavar="TIER",
        help=f"Suggest the next known downgrade tier (e.g. {prefix}-8-53248)",
    )
    return parser


def _downgrade_pair(values: list[str], parser: argparse.ArgumentParser) -> tuple[str, str]:
    parts = " ".join(values).split()
    if len(parts) != 2:
        parser.error("--check-downgrade takes exactly two tiers: CURRENT RECOMMENDED")
    return parts[0], parts[1]


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> list[str]:
    if args.bump_mem is not None:
        return render_bump(bump_memory_to_max(parse_tier(args.bump_mem)))
    if args.check_downgrade is not None:
        current, recommended = _downgrade_pair(args.check_downgrade, parser)
        return render_downgrade_check(check_downgrade(parse_tier(current), parse_tier(recommended)))
    if args.downgrade is not None:
        return render_downgrade(suggest_downgrade(parse_tier(args.downgrade)))
    if args.tier is not None:
        return render_next_tier(next_tier(parse_tier(args.tier)))
    if args.cpu is not None:
        return render_cpu_recommendation(recommend_from_cpu(args.cpu))
    return render_memory_recommendation(recommend_from_memory(parse_memory(args.mem)))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        lines = run(args, parser)
    except TierCalcError as exc:
        log.debug("%s: %s", exc.code, exc.message)
        print(exc.message)
        return 1
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
