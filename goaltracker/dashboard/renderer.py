"""Dashboard image renderer."""

import logging
from datetime import datetime
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from goaltracker.core.models import DashboardSummary, GoalDefinition

from .ticker import Headline

logger = logging.getLogger(__name__)


class DashboardRenderer:
    """Renders the goal dashboard to an image."""

    def __init__(self, output_dir: str = "static/images"):
        """
        Initialize renderer.

        Args:
            output_dir: Directory to save generated images
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        # Try to load fonts, fall back to default
        self.fonts = self._load_fonts()

    def _load_fonts(self) -> dict:
        """Load fonts for rendering."""
        fonts = {}

        font_paths = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
            "/System/Library/Fonts/Helvetica.ttc",  # macOS
        ]

        try:
            for path in font_paths:
                if Path(path).exists():
                    fonts["header"] = ImageFont.truetype(path, 24)
                    fonts["title"] = ImageFont.truetype(path, 18)
                    fonts["normal"] = ImageFont.truetype(path, 16)
                    fonts["small"] = ImageFont.truetype(path, 13)
                    logger.info(f"Loaded fonts from {path}")
                    break
        except OSError as e:
            logger.warning(f"Could not load TrueType fonts: {e}, using default")
            fonts = {}

        if not fonts:
            default_font = ImageFont.load_default()
            for size in ("header", "title", "normal", "small"):
                fonts[size] = default_font

        return fonts

    def render(
        self,
        goals: list[GoalDefinition],
        summary: DashboardSummary,
        headline: Headline,
        width: int = 800,
        height: int = 480,
    ) -> tuple[str, str]:
        """
        Render the dashboard.

        Args:
            goals: Goals to draw, in display order
            summary: Aggregate figures for the footer
            headline: Current clock text and quote
            width: Image width
            height: Image height

        Returns:
            Tuple of (filename, file_path)
        """
        logger.info(f"Rendering dashboard with {len(goals)} goals")

        image = Image.new("RGB", (width, height), "white")
        draw = ImageDraw.Draw(image)

        self._draw_header(draw, summary, headline, width)
        self._draw_goals(draw, goals, width, height)
        self._draw_footer(draw, summary, width, height)

        image = image.convert("1")

        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        filename = f"dashboard-{timestamp}"
        file_path = self.output_dir / f"{filename}.png"

        image.save(file_path, "PNG")
        logger.info(f"Saved dashboard to {file_path}")

        return filename, str(file_path)

    def _draw_header(self, draw: ImageDraw, summary: DashboardSummary, headline: Headline, width: int):
        """Draw overall progress, date and quote."""
        progress_text = f"Overall progress: {summary.overall_progress}%"
        draw.text((20, 12), progress_text, fill="black", font=self.fonts["header"])

        if headline.clock_text:
            bbox = draw.textbbox((0, 0), headline.clock_text, font=self.fonts["small"])
            text_width = bbox[2] - bbox[0]
            draw.text(
                (width - text_width - 20, 18),
                headline.clock_text,
                fill="black",
                font=self.fonts["small"],
            )

        if headline.quote:
            draw.text((20, 44), f'"{headline.quote}"', fill="black", font=self.fonts["small"])

        draw.line([20, 66, width - 20, 66], fill="black", width=2)

    def _draw_goals(self, draw: ImageDraw, goals: list[GoalDefinition], width: int, height: int):
        """Draw one row per goal."""
        y_offset = 78
        row_height = 52

        for goal in goals:
            if y_offset > height - 110:  # Leave room for footer
                break

            self._draw_goal_row(draw, goal, y_offset, width)
            y_offset += row_height

    def _draw_goal_row(self, draw: ImageDraw, goal: GoalDefinition, y: int, width: int):
        """Draw goal name, progress bar and targets."""
        x_margin = 30
        bar_width = 360

        draw.text((x_margin, y), goal.name, fill="black", font=self.fonts["title"])

        self._draw_progress_bar(draw, x_margin, y + 24, bar_width, 16, goal.progress)

        text_x = x_margin + bar_width + 20
        draw.text((text_x, y + 22), f"{goal.progress}%", fill="black", font=self.fonts["normal"])

        target_text = f"{goal.daily_target:g}h/day  {goal.weekly_target:g}h/week"
        bbox = draw.textbbox((0, 0), target_text, font=self.fonts["small"])
        text_width = bbox[2] - bbox[0]
        draw.text((width - text_width - 30, y + 24), target_text, fill="black", font=self.fonts["small"])

    def _draw_progress_bar(self, draw: ImageDraw, x: int, y: int, width: int, height: int, percent: int):
        """Draw a horizontal bar filled to `percent`."""
        percent = max(0, min(percent, 100))
        filled_width = int(width * percent / 100)

        if filled_width > 0:
            draw.rectangle([x, y, x + filled_width, y + height], fill="black", outline="black")

        draw.rectangle([x, y, x + width, y + height], outline="black", width=2)

    def _draw_footer(self, draw: ImageDraw, summary: DashboardSummary, width: int, height: int):
        """Draw summary stats and today's figures."""
        y = height - 80

        draw.line([20, y - 10, width - 20, y - 10], fill="black", width=2)

        stats_text = (
            f"On track: {summary.goals_on_track}/{summary.total_goals}   "
            f"Days remaining: {summary.days_remaining}   "
            f"Total earned: {summary.total_earnings:.0f}"
        )
        draw.text((20, y), stats_text, fill="black", font=self.fonts["normal"])

        if summary.today:
            today = summary.today
            today_text = (
                f"Today: {today.total_study_hours:.1f}h study   "
                f"{today.goal_completion}% complete   "
                f"earned {today.earnings:.0f}"
            )
        else:
            today_text = "Today: no entry yet"
        draw.text((20, y + 28), today_text, fill="black", font=self.fonts["normal"])

        time_text = f"Last update: {datetime.now().strftime('%H:%M')}"
        bbox = draw.textbbox((0, 0), time_text, font=self.fonts["small"])
        text_width = bbox[2] - bbox[0]
        draw.text((width - text_width - 20, y + 54), time_text, fill="black", font=self.fonts["small"])


def demo_render():
    """Demo: Render the dashboard from the stored state."""
    from datetime import date

    from dotenv import load_dotenv

    from goaltracker.config import Settings
    from goaltracker.core.aggregation import build_dashboard
    from goaltracker.store.database import KeyValueStore
    from goaltracker.store.repository import StateRepository

    load_dotenv()
    settings = Settings()

    repository = StateRepository(KeyValueStore(settings.db_path), settings.seed_sample_data)
    state = repository.load_state()
    summary = build_dashboard(
        state,
        date.today(),
        settings.challenge_start,
        settings.challenge_end,
        settings.on_track_threshold,
    )

    renderer = DashboardRenderer(f"{settings.static_dir}/images")
    headline = Headline(clock_text=datetime.now().strftime("%A, %d %B %Y"))
    filename, file_path = renderer.render(list(state.goals.values()), summary, headline)

    print("\n" + "=" * 60)
    print("DASHBOARD RENDERED")
    print("=" * 60)
    print(f"\nImage saved to: {file_path}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo_render()
