"""Tests for the render target contract, replay and the ReportLab target."""

import pytest
from reportlab.pdfgen.canvas import Canvas

from scriptpress.config import ScriptPressSettings
from scriptpress.exceptions import RenderError
from scriptpress.layout import (
    BLACK,
    Bookmark,
    DrawCommand,
    FontSet,
    FontStyle,
    LayoutEngine,
    LayoutResult,
    MonospaceMetrics,
    Page,
)
from scriptpress.parser import ScriptParser
from scriptpress.render import (
    PdfRenderTarget,
    RenderTarget,
    ReportLabMetrics,
    load_fonts,
    register_fonts,
    replay,
)
from scriptpress.render.pdf import BUILTIN_FONTS
from scriptpress.utils import TextDirection, shape


class RecordingTarget:
    """Render target that records every call it receives."""

    def __init__(self):
        self.calls = []
        self.directions = []

    def add_page(self, width, height):
        self.calls.append(("page", width, height))

    def draw_text(self, text, x, y, font, size, color, direction=None):
        self.calls.append(("text", text, x, y))
        self.directions.append(direction)

    def add_bookmark(self, title, page_index):
        self.calls.append(("bookmark", title, page_index))

    def finish(self):
        self.calls.append(("finish",))


def command(text, y=700.0):
    return DrawCommand(text=text, x=72.0, y=y, font=FontStyle.REGULAR, size=12)


@pytest.fixture
def two_page_layout():
    return LayoutResult(
        pages=[
            Page(index=0, width=612, height=792, commands=[command("Title")]),
            Page(
                index=1,
                width=612,
                height=792,
                commands=[command("INT. HALL"), command("Action", 682)],
            ),
        ],
        bookmarks=[Bookmark("INT. HALL", 1)],
        language="en",
        title="Title",
    )


class TestReplay:
    def test_calls_arrive_in_page_order(self, two_page_layout):
        target = RecordingTarget()

        replay(two_page_layout, target)

        assert target.calls == [
            ("page", 612, 792),
            ("text", "Title", 72.0, 700.0),
            ("page", 612, 792),
            ("text", "INT. HALL", 72.0, 700.0),
            ("text", "Action", 72.0, 682),
            ("bookmark", "INT. HALL", 1),
            ("finish",),
        ]

    def test_recording_target_satisfies_protocol(self):
        assert isinstance(RecordingTarget(), RenderTarget)
        assert isinstance(PdfRenderTarget("unused.pdf"), RenderTarget)


class TestFonts:
    def test_builtin_fonts_by_default(self):
        assert register_fonts(ScriptPressSettings()) == BUILTIN_FONTS

    def test_missing_font_file(self, tmp_path):
        settings = ScriptPressSettings(regular_font_path=tmp_path / "nope.ttf")

        with pytest.raises(RenderError, match="Font file not found"):
            register_fonts(settings)

    def test_unreadable_font_file(self, tmp_path):
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"this is not a font")

        with pytest.raises(RenderError, match="Could not load font"):
            register_fonts(ScriptPressSettings(bold_font_path=bogus))

    def test_reportlab_metrics(self):
        metrics = ReportLabMetrics("Helvetica")

        assert metrics.width_of_text_at_size("", 12) == 0
        assert metrics.width_of_text_at_size("WW", 12) > metrics.width_of_text_at_size(
            "ii", 12
        )
        assert metrics.width_of_text_at_size("abc", 24) == pytest.approx(
            2 * metrics.width_of_text_at_size("abc", 12)
        )

    def test_load_fonts(self):
        fonts = load_fonts(ScriptPressSettings())

        assert fonts.get(FontStyle.BOLD) == ReportLabMetrics("Helvetica-Bold")
        assert fonts.width("Hello", FontStyle.REGULAR, 12) > 0


class TestPdfRenderTarget:
    def test_writes_pdf(self, tmp_path, two_page_layout):
        output = tmp_path / "out.pdf"
        target = PdfRenderTarget(output, title="Title")

        replay(two_page_layout, target)

        assert target.page_count == 2
        data = output.read_bytes()
        assert data.startswith(b"%PDF")
        assert b"/Outlines" in data

    def test_rtl_text(self, tmp_path):
        output = tmp_path / "rtl.pdf"
        target = PdfRenderTarget(output, language="he")

        target.add_page(612, 792)
        target.draw_text(shape("חדר (502)"), 72, 700, FontStyle.REGULAR, 12, BLACK)
        target.finish()

        assert output.read_bytes().startswith(b"%PDF")


class TestVisualOrder:
    """Strings handed to ReportLab must already be in left-to-right order."""

    @pytest.fixture
    def drawn(self, monkeypatch):
        strings = []

        def record(canvas, x, y, text, *args, **kwargs):
            strings.append(text)

        monkeypatch.setattr(Canvas, "drawString", record)
        return strings

    @pytest.fixture
    def target(self, tmp_path, drawn):
        target = PdfRenderTarget(tmp_path / "order.pdf", language="he")
        target.add_page(612, 792)
        return target

    def draw(self, target, text, direction=None):
        target.draw_text(
            text, 72, 700, FontStyle.REGULAR, 12, BLACK, direction=direction
        )

    @pytest.mark.parametrize(
        ("logical", "visual"),
        [
            ("שלום עולם", "םלוע םולש"),
            ("אני אוהב Python", "Python בהוא ינא"),
            ("חדר 502", "502 רדח"),
            ("חדר (502)", "(502) רדח"),
        ],
    )
    def test_rtl_lines(self, target, drawn, logical, visual):
        self.draw(target, shape(logical))

        assert drawn == [visual]

    def test_ltr_text_is_untouched(self, target, drawn):
        self.draw(target, "INT. KITCHEN 12 (NIGHT)")

        assert drawn == ["INT. KITCHEN 12 (NIGHT)"]

    def test_latin_line_from_rtl_paragraph(self, target, drawn):
        self.draw(target, "call 12345 now call", TextDirection.RTL)

        assert drawn == ["call 12345 now call"]

    def test_replayed_layout_is_reordered_per_element(self, tmp_path, drawn):
        engine = LayoutEngine(
            settings=ScriptPressSettings(page_width=300),
            fonts=FontSet(MonospaceMetrics()),
        )
        content = "שלום שלום שלום שלום" + " call 12345 now" * 4
        layout = engine.layout(ScriptParser().parse("# א\n" + content))

        replay(layout, PdfRenderTarget(tmp_path / "wrapped.pdf", language="he"))

        body = drawn[drawn.index("א") + 1 :]
        assert len(body) > 1
        assert all("54321" not in text for text in body)
        assert "nohtyP" not in " ".join(body)
        assert "12345" in " ".join(body[1:])

    def test_draw_before_page_fails(self, tmp_path):
        target = PdfRenderTarget(tmp_path / "x.pdf")

        with pytest.raises(RenderError, match="No page"):
            target.draw_text("x", 0, 0, FontStyle.REGULAR, 12, BLACK)

    def test_bookmark_must_target_current_page(self, tmp_path):
        target = PdfRenderTarget(tmp_path / "x.pdf")
        target.add_page(612, 792)
        target.add_page(612, 792)

        with pytest.raises(RenderError, match="targets page 0"):
            target.add_bookmark("INT. HALL", 0)

    def test_unwritable_output(self, tmp_path):
        target = PdfRenderTarget(tmp_path / "missing" / "dir" / "x.pdf")
        target.add_page(612, 792)

        with pytest.raises(RenderError, match="Could not write PDF"):
            target.finish()
