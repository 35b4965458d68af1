from __future__ import annotations

from suryamitra.schemas.guidance import Challenge, ChallengeType, Highlight

CHALLENGES: tuple[Challenge, ...] = (
    Challenge(
        key=ChallengeType.DUST,
        problem=(
            "In cities like Delhi or Jaipur, dust accumulation (soiling) can reduce panel "
            "output by 15-30% within a month, significantly extending the payback period."
        ),
        solution=(
            "Install automated sprinkler systems or subscribe to monthly professional "
            "cleaning services. Opt for frameless panels to help water runoff carry dust away."
        ),
    ),
    Challenge(
        key=ChallengeType.HEAT,
        problem=(
            "Solar panels lose efficiency as they get hotter. In Indian summers (45°C+), "
            "efficiency can drop by 10-15% compared to standard test conditions."
        ),
        solution=(
            "Ensure Module Mounting Structures (MMS) have at least 10-15cm gap from the roof "
            "for airflow. Choose bifacial panels or those with a lower temperature coefficient."
        ),
    ),
    Challenge(
        key=ChallengeType.MONSOON,
        problem=(
            "During July-September, heavy cloud cover and rain reduce generation drastically. "
            "Grid dependence increases just when you expect savings."
        ),
        solution=(
            "Size the system on annual averages, not just peak summer. Use net metering "
            "banking to carry excess summer credits into the monsoon."
        ),
    ),
    Challenge(
        key=ChallengeType.GRID,
        problem=(
            "Standard on-grid inverters shut down during power cuts for safety. In areas with "
            "frequent load shedding, the solar plant sits idle during outages."
        ),
        solution=(
            "Invest in a hybrid inverter with a Lithium-Iron-Phosphate (LFP) battery backup "
            "so solar energy stays usable when the grid is down."
        ),
    ),
)

HIGHLIGHTS: tuple[Highlight, ...] = (
    Highlight(value="300", label="Average Sunny Days"),
    Highlight(value="40%", label="Lower Panel Costs (YoY)"),
    Highlight(value="₹78k", label="Max Govt Subsidy"),
    Highlight(value="3-4yr", label="Average ROI Period"),
)


def list_challenges(key: ChallengeType | None = None) -> list[Challenge]:
    if key is None:
        return list(CHALLENGES)
    return [challenge for challenge in CHALLENGES if challenge.key == key]
