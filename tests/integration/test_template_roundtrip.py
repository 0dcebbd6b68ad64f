"""Integration tests: template build followed by fill."""

import io

import docx
import pytest

from tailor.contexts.optimization.optimized_sections import ExperienceOverlay, OptimizedSections
from tailor.contexts.templating.config_resolver import PayloadLimits
from tailor.contexts.templating.docx_generator import generate_resume_docx
from tailor.contexts.templating.docx_package import read_document_xml, save_document
from tailor.contexts.templating.filler import patch_paragraphs, populate_template
from tailor.contexts.templating.injector import build_template
from tailor.contexts.templating.payload import build_template_payload


@pytest.mark.integration
class TestTemplateRoundTrip:
    """Build a template from a resume, fill it with the same resume."""

    def test_source_resume_round_trip(self, resume_docx_bytes, sample_resume, read_paragraphs):
        template = build_template(resume_docx_bytes)
        template_xml = read_document_xml(template)
        assert "{{contact.name}}" in template_xml
        assert "{{experience.1.bullet.0}}" in template_xml
        assert "{{skills}}" in template_xml

        payload = build_template_payload(sample_resume, limits=PayloadLimits())
        filled = populate_template(template, payload)

        assert read_paragraphs(filled) == read_paragraphs(resume_docx_bytes)
        assert "{{" not in read_document_xml(filled)

    def test_generated_resume_round_trip(self, sample_resume, read_paragraphs):
        generated = generate_resume_docx(sample_resume)
        template = build_template(generated, resume=sample_resume)

        filled = populate_template(template, build_template_payload(sample_resume, limits=PayloadLimits()))

        assert read_paragraphs(filled) == read_paragraphs(generated)

    def test_overlay_reaches_filled_document(self, resume_docx_bytes, sample_resume, read_paragraphs):
        template = build_template(resume_docx_bytes, resume=sample_resume)
        overlay = OptimizedSections(
            experience=[ExperienceOverlay(bullets=["Built REST APIs on AWS", "Cut p99 latency by 40%"])]
        )

        filled = populate_template(
            template, build_template_payload(sample_resume, overlay, PayloadLimits())
        )
        texts = read_paragraphs(filled)

        assert "• Built REST APIs on AWS" in texts
        assert "• Cut p99 latency by 40%" in texts
        assert "• Maintained payment APIs" in texts

    def test_template_path_input(self, tmp_path, resume_docx_path, sample_resume, read_paragraphs):
        template_path = tmp_path / "template.docx"
        template_path.write_bytes(build_template(resume_docx_path, resume=sample_resume))

        filled = populate_template(template_path, build_template_payload(sample_resume, limits=PayloadLimits()))

        assert read_paragraphs(filled)[0] == "Jane Doe"


@pytest.mark.integration
class TestSplitRunPlaceholders:
    """Placeholders split across runs are patched in place."""

    @pytest.fixture
    def split_template(self):
        document = docx.Document()
        paragraph = document.add_paragraph()
        head = paragraph.add_run("Hi {{contact.")
        head.bold = True
        paragraph.add_run("name}}")
        paragraph.add_run("!")
        return save_document(document)

    def test_value_lands_in_first_run(self, split_template):
        filled = populate_template(split_template, {"contact.name": "Jane & Co"})

        paragraph = docx.Document(io.BytesIO(filled)).paragraphs[0]
        assert paragraph.text == "Hi Jane & Co!"
        assert [run.text for run in paragraph.runs] == ["Hi Jane & Co", "!"]
        assert paragraph.runs[0].bold is True

    def test_emptied_formatted_run_kept(self):
        document = docx.Document()
        paragraph = document.add_paragraph()
        paragraph.add_run("{{contact.")
        tail = paragraph.add_run("name}}")
        tail.italic = True
        paragraph.add_run(" here")

        filled = populate_template(save_document(document), {"contact.name": "Jane"})

        runs = docx.Document(io.BytesIO(filled)).paragraphs[0].runs
        assert [run.text for run in runs] == ["Jane", "", " here"]
        assert runs[1].italic is True

    def test_placeholder_over_many_runs_leaves_no_bare_runs(self):
        document = docx.Document()
        paragraph = document.add_paragraph()
        for piece in ("{{", "contact", ".", "name", "}}"):
            paragraph.add_run(piece)

        filled = populate_template(save_document(document), {"contact.name": "Jane"})

        assert [run.text for run in docx.Document(io.BytesIO(filled)).paragraphs[0].runs] == ["Jane"]

    def test_patch_count(self, split_template):
        _, replaced = patch_paragraphs(split_template, {"contact.name": "Jane"})
        assert replaced == 1

    def test_repeated_placeholder_in_one_paragraph(self):
        document = docx.Document()
        document.add_paragraph("{{skills}} / {{skills}}")

        filled = populate_template(save_document(document), {"skills": "Python"})

        assert docx.Document(io.BytesIO(filled)).paragraphs[0].text == "Python / Python"

    def test_unknown_placeholder_kept(self):
        document = docx.Document()
        document.add_paragraph("{{contact.fax}}")

        filled = populate_template(save_document(document), {"contact.name": "Jane"})

        assert docx.Document(io.BytesIO(filled)).paragraphs[0].text == "{{contact.fax}}"
