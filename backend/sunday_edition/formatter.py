"""Render a WeeklyBriefContent as the bracket-section article body."""

from sunday_edition.models import WeeklyBriefContent
from sunday_edition.stages.data_point import DATA_UNAVAILABLE

REARVIEW_HEADER = "[[The Rearview]]"
AGENDA_HEADER = "[[The Agenda]]"


def format_weekly_brief_as_article(content: WeeklyBriefContent) -> str:
    """Serialize the brief; sections with nothing to say are omitted entirely.

    Order: Rearview narrative, Agenda events, holiday section, data point.
    """
    blocks: list[str] = [REARVIEW_HEADER, content.rearview_narrative]

    if content.horizon_events:
        blocks.append(AGENDA_HEADER)
        blocks.extend(
            f"{event.day}: {event.name} - {event.why_it_matters}"
            for event in content.horizon_events
        )

    holiday = content.holiday_section
    if holiday and holiday.events:
        blocks.append(f"[[That Time of Year: {holiday.holiday_name}]]\n{holiday.date}")
        blocks.extend(
            f"{event.day}: {event.name} - {event.description}" for event in holiday.events
        )

    data_point = content.data_point
    if data_point.value != DATA_UNAVAILABLE:
        lines = [data_point.value]
        if data_point.context:
            lines.append(data_point.context)
        blocks.append(f"[[{data_point.label}]]")
        blocks.append("\n".join(lines))

    return "\n\n".join(block.strip() for block in blocks).strip()
