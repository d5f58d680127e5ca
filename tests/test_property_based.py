"""Property-based tests using Hypothesis.

Random scripts, metadata and page geometries are generated to check the
properties the parser, the RTL helpers and the layout engine must keep for
every input, not just the hand-written examples.
"""

import string

from hypothesis import HealthCheck, assume, example, given, settings
from hypothesis import strategies as st

from scriptpress.config import ScriptPressSettings
from scriptpress.layout import FontSet, LayoutEngine, MonospaceMetrics
from scriptpress.parser import ScriptParser
from scriptpress.parser.builder import build_scenes
from scriptpress.parser.classifier import classify
from scriptpress.parser.frontmatter import decode, encode
from scriptpress.parser.models import SceneMarker, ScriptElement, ScriptMetadata
from scriptpress.utils.direction import mirror_brackets, shape, visual_order

# The autouse settings fixture only resets globals, so reusing it across
# generated examples is harmless.
property_settings = settings(
    max_examples=75,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

HEBREW = "אבגדהוזחטיכלמנסעפצקרשת"

metadata_values = st.text(max_size=40)
metadata_strategy = st.builds(
    ScriptMetadata,
    title=metadata_values,
    subtitle=metadata_values,
    writers=metadata_values,
    prod_company=metadata_values,
    date=metadata_values,
    character_folder=metadata_values,
)

script_lines = st.one_of(
    st.text(alphabet=string.ascii_letters + " .,!?'", max_size=30),
    st.builds(
        lambda sigil, text: sigil + text,
        st.sampled_from(["#", "##", "@", '"', "-"]),
        st.text(alphabet=string.ascii_letters + " ", max_size=20),
    ),
)


class TestFrontmatterProperties:
    @property_settings
    @given(metadata=metadata_strategy)
    @example(metadata=ScriptMetadata(title='He said "no": twice', date=" 2024 "))
    @example(metadata=ScriptMetadata(writers="line one\nline two\\"))
    def test_encode_decode_round_trip(self, metadata):
        decoded, body = decode(encode(metadata))

        assert decoded == metadata
        assert body == ""

    @property_settings
    @given(metadata=metadata_strategy, body=st.text(max_size=200))
    def test_body_survives_unchanged(self, metadata, body):
        assume(not body.startswith("-"))

        decoded, rest = decode(encode(metadata) + body)

        assert decoded == metadata
        assert rest == body


class TestClassifierProperties:
    @property_settings
    @given(line=st.text(max_size=60))
    def test_every_line_is_classified(self, line):
        result = classify(line)

        assert isinstance(result, ScriptElement | SceneMarker)
        content = result.heading if isinstance(result, SceneMarker) else result.content
        assert content == content.strip()

    @property_settings
    @given(lines=st.lists(script_lines, max_size=40))
    def test_scene_numbers_are_sequential(self, lines):
        scenes = build_scenes("\n".join(lines))
        headings = sum(
            1 for line in lines if isinstance(classify(line), SceneMarker)
        )

        numbered = [scene.id for scene in scenes if scene.is_numbered]
        assert numbered == list(range(1, headings + 1))
        # Only the first scene can be the unnumbered one
        unnumbered = [i for i, scene in enumerate(scenes) if not scene.is_numbered]
        assert unnumbered in ([], [0])

    @property_settings
    @given(lines=st.lists(script_lines, max_size=40))
    def test_no_content_is_lost(self, lines):
        body = "\n".join(lines)
        scenes = build_scenes(body)

        kept = sum(len(scene.elements) for scene in scenes) + sum(
            1 for scene in scenes if scene.is_numbered
        )
        assert kept == sum(1 for line in lines if line.strip())


bracket_free = st.text(alphabet=string.ascii_letters + HEBREW + " 0123456789")
bracket_pair = st.builds(
    lambda pair, inner: pair[0] + inner + pair[1],
    st.sampled_from(["()", "[]", "{}"]),
    st.text(alphabet=string.ascii_letters + HEBREW + " ", min_size=1),
)


class TestDirectionProperties:
    @property_settings
    @given(segments=st.lists(st.one_of(bracket_free, bracket_pair), max_size=8))
    def test_mirroring_is_self_inverse(self, segments):
        text = "שלום " + "".join(segments)

        assert mirror_brackets(mirror_brackets(text)) == text

    @property_settings
    @given(text=st.text(alphabet=string.printable))
    def test_shape_leaves_ltr_text_alone(self, text):
        assert shape(text) == text

    @property_settings
    @given(segments=st.lists(st.one_of(bracket_free, bracket_pair), max_size=8))
    def test_shape_keeps_length_and_characters(self, segments):
        text = "שלום " + "".join(segments)

        assert sorted(shape(text)) == sorted(text)

    @property_settings
    @given(text=st.text(alphabet=HEBREW + " ", min_size=1))
    def test_pure_rtl_text_is_drawn_reversed(self, text):
        assert visual_order(shape(text)) == text[::-1]


words = st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=20)


class TestLayoutProperties:
    @property_settings
    @given(
        text_words=st.lists(words, min_size=1, max_size=400),
        page_height=st.sampled_from([144.0, 200.0, 300.0, 792.0]),
        scene_spacing=st.sampled_from([0.0, 30.0]),
    )
    def test_split_text_is_preserved(self, text_words, page_height, scene_spacing):
        text = " ".join(text_words)
        engine = LayoutEngine(
            settings=ScriptPressSettings(
                page_height=page_height, scene_spacing=scene_spacing
            ),
            fonts=FontSet(MonospaceMetrics()),
        )

        result = engine.layout(ScriptParser().parse(text))
        body = [line for page in result.pages[1:] for line in page.texts]

        assert " ".join(body) == text
        assert all(page.commands for page in result.pages)
        assert [p.index for p in result.pages] == list(range(result.page_count))
        assert all(
            command.y >= engine.settings.margin
            for page in result.pages[1:]
            for command in page.commands
        )

    @property_settings
    @given(lines=st.lists(script_lines, max_size=60))
    def test_every_numbered_scene_gets_a_bookmark(self, lines):
        engine = LayoutEngine(
            settings=ScriptPressSettings(page_height=300),
            fonts=FontSet(MonospaceMetrics()),
        )
        script = ScriptParser().parse("\n".join(lines))

        result = engine.layout(script)

        assert [b.title for b in result.bookmarks] == [
            scene.heading for scene in script.numbered_scenes
        ]
        pages = [b.page_index for b in result.bookmarks]
        assert pages == sorted(pages)
        assert all(1 <= index < result.page_count for index in pages)
