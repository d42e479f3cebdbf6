# -*- coding: utf-8 -*-
"""
PDF export of assessment results.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from pcos_assessment.app.config import Config
from pcos_assessment.models.result import ResultSummary
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.utils.helpers import format_date
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)

HEADER_COLOR = colors.HexColor(Config.PRIMARY_COLOR)
ROW_ALT_COLOR = colors.HexColor('#f8f9fa')


class ReportService:
    """Generates a PDF summary of a ResultSummary."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else Config.REPORTS_DIR

    def default_path(self, summary: ResultSummary) -> Path:
        """Suggested file name for a result."""
        stamp = summary.generated_at.strftime('%Y%m%d_%H%M%S')
        return self.output_dir / f"assessment_results_{stamp}.pdf"

    def _styles(self):
        styles = getSampleStyleSheet()
        return {
            'title': styles['Title'],
            'heading': ParagraphStyle('heading', parent=styles['Heading2'], spaceBefore=12),
            'body': styles['BodyText'],
            'small': ParagraphStyle('small', parent=styles['BodyText'], fontSize=8,
                                    textColor=colors.HexColor(Config.TEXT_LIGHT)),
        }

    def _table(self, rows, col_widths) -> Table:
        table = Table(rows, colWidths=col_widths)
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), HEADER_COLOR),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTNAME', (0, 0), (-1, -1), 'Helvetica'),
            ('FONTSIZE', (0, 0), (-1, -1), 10),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, ROW_ALT_COLOR])
        ]))
        return table

    def export_results(self, summary: ResultSummary, file_path: Optional[Path] = None) -> Path:
        """
        Write the result summary to a PDF file.

        Returns:
            Path of the written file
        """
        file_path = Path(file_path) if file_path else self.default_path(summary)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        doc = SimpleDocTemplate(
            str(file_path),
            pagesize=A4,
            rightMargin=2*cm,
            leftMargin=2*cm,
            topMargin=2*cm,
            bottomMargin=2*cm,
            title=tr("results.title"),
        )
        styles = self._styles()
        story = []

        story.append(Paragraph(tr("results.title"), styles['title']))
        story.append(Paragraph(
            tr("results.generated_on", date=format_date(summary.generated_at, Config.DATE_FORMAT_DISPLAY)),
            styles['body']
        ))
        story.append(Spacer(1, 0.5*cm))

        # Overall risk
        story.append(Paragraph(tr("results.overall"), styles['heading']))
        story.append(self._table([
            ["Measure", "Value"],
            ["Risk Score", f"{summary.risk_score}/100"],
            ["Risk Level", tr("results.risk_badge", level=summary.risk_level.upper())],
            [tr("results.pcos_probability"), f"{summary.pcos_probability * 100:.1f}%"],
            [tr("results.metabolic_risk"), f"{summary.metabolic_risk * 100:.1f}%"],
        ], [8*cm, 8*cm]))
        if summary.needs_consultation:
            story.append(Spacer(1, 0.3*cm))
            story.append(Paragraph(f"<b>{tr('results.consultation.title')}</b>", styles['body']))
            story.append(Paragraph(tr("results.consultation.body"), styles['body']))

        # Key factors
        if summary.key_factors:
            story.append(Paragraph(tr("results.factors.title"), styles['heading']))
            rows = [["Factor", "Value", "Impact", "Trend"]]
            rows += [[f.factor, f.value, f.impact, f.trend.capitalize()] for f in summary.key_factors]
            story.append(self._table(rows, [6*cm, 4*cm, 3*cm, 3*cm]))

        # Constraint residuals
        if summary.residuals:
            story.append(Paragraph(tr("results.physio.title"), styles['heading']))
            rows = [["Constraint", "Residual", "Status"]]
            rows += [[r.constraint, f"{r.residual:.3f}", r.status] for r in summary.residuals]
            story.append(self._table(rows, [8*cm, 4*cm, 4*cm]))
            story.append(Paragraph(tr("results.physio.note"), styles['small']))

        # Recommendations
        if summary.recommendations:
            story.append(Paragraph(tr("results.recommendations.title"), styles['heading']))
            for rec in summary.recommendations:
                story.append(Paragraph(f"<b>{escape(rec.title)}</b>: {escape(rec.description)}", styles['body']))

        story.append(Spacer(1, 0.5*cm))
        story.append(Paragraph(
            f"{tr('results.model.version')}: {summary.model_version} | "
            f"{tr('results.model.training')}: {Config.MODEL_TRAINING} | "
            f"{tr('results.model.updated')}: {Config.MODEL_UPDATED}",
            styles['small']
        ))
        story.append(Paragraph(f"Exported {datetime.now().strftime(Config.DATE_FORMAT)}", styles['small']))

        doc.build(story)
        logger.info(f"Results exported to {file_path}")
        return file_path
