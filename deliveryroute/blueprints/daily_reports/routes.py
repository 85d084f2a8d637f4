"""Daily report (Z-closeout) routes."""
from io import BytesIO

from flask import jsonify, send_file, current_app
from flask_login import login_required
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from deliveryroute import db
from deliveryroute.blueprints.daily_reports import daily_reports_bp
from deliveryroute.blueprints.params import date_arg, required_int_arg
from deliveryroute.models import DailyReport
from deliveryroute.services import RouteSessionService
from deliveryroute.utils import mileage, money


def _hline(width_pt):
    """Thin horizontal line (grey), full frame width."""
    t = Table([['']], colWidths=[width_pt], rowHeights=[2])
    t.setStyle(TableStyle([
        ('LINEBELOW', (0, 0), (-1, -1), 0.5, colors.HexColor('#cccccc')),
        ('LEFTPADDING', (0, 0), (-1, -1), 0),
        ('RIGHTPADDING', (0, 0), (-1, -1), 0),
    ]))
    return t


def _escape(text):
    return (text or '').replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


@daily_reports_bp.route('')
@login_required
def list():
    driver_id = required_int_arg('driverId', 'Driver ID')
    reports = RouteSessionService.list_reports(driver_id, date_arg())
    return jsonify([r.to_dict() for r in reports])


@daily_reports_bp.route('/<int:report_id>')
@login_required
def detail(report_id):
    report = db.get_or_404(DailyReport, report_id, description='Daily report not found')
    return jsonify(report.to_dict())


def _build_daily_report_pdf(report):
    """Z-closeout sheet: header, mileage, order counts, collected amount, returned stock."""
    buffer = BytesIO()
    margin = 50
    frame_width = letter[0] - 2 * margin
    doc = SimpleDocTemplate(
        buffer, pagesize=letter,
        leftMargin=margin, rightMargin=margin, topMargin=margin, bottomMargin=margin,
    )
    styles = getSampleStyleSheet()
    black = colors.black
    grey = colors.HexColor('#555555')
    border_light = colors.HexColor('#e2e8f0')

    company_name = current_app.config.get('COMPANY_NAME') or 'Company Name'
    company_phone = current_app.config.get('COMPANY_PHONE') or ''
    currency = current_app.config.get('DEFAULT_CURRENCY') or ''

    title_style = ParagraphStyle(
        'DocTitle', parent=styles['Heading1'],
        fontSize=18, spaceAfter=2, textColor=black, fontName='Helvetica-Bold',
    )
    small_style = ParagraphStyle('Small', parent=styles['Normal'], fontSize=9, textColor=grey, spaceAfter=0)
    body_style = ParagraphStyle('Body', parent=styles['Normal'], fontSize=10, textColor=black, spaceAfter=2)
    story = []

    # ----- Header -----
    story.append(Paragraph(
        '<b>{}</b>'.format(_escape(company_name)),
        ParagraphStyle('Company', parent=styles['Normal'], fontSize=14, textColor=black, fontName='Helvetica-Bold'),
    ))
    if company_phone:
        story.append(Paragraph('Tel: {}'.format(_escape(company_phone)), small_style))
    story.append(Spacer(1, 0.2 * inch))
    story.append(_hline(frame_width))
    story.append(Spacer(1, 0.15 * inch))

    story.append(Paragraph('DAILY CLOSEOUT', title_style))
    story.append(_hline(frame_width))
    story.append(Spacer(1, 0.12 * inch))

    driver_name = report.driver.name if report.driver else '—'
    date_str = report.date.strftime('%d/%m/%Y') if report.date else '—'
    ref_table = Table([
        [Paragraph('Driver: <b>{}</b>'.format(_escape(driver_name)), small_style),
         Paragraph('Date: <b>{}</b>'.format(date_str), ParagraphStyle('SmallRight', parent=small_style, alignment=2))],
        [Paragraph('Report No: <b>{}</b> / Session <b>{}</b>'.format(report.id, report.session_id), small_style), ''],
    ], colWidths=[frame_width - 2.5 * inch, 2.5 * inch])
    ref_table.setStyle(TableStyle([
        ('LEFTPADDING', (0, 0), (0, -1), 0),
        ('RIGHTPADDING', (-1, 0), (-1, -1), 0),
    ]))
    story.append(ref_table)
    story.append(Spacer(1, 0.25 * inch))

    # ----- Mileage and orders -----
    summary = [
        ['Start mileage', mileage(report.start_mileage) or '—'],
        ['End mileage', mileage(report.end_mileage) or '—'],
        ['Distance driven', mileage(report.distance_driven) or '—'],
        ['Total orders', str(report.total_orders)],
        ['Delivered', str(report.delivered_orders)],
        ['Not delivered', str(report.not_delivered_orders)],
        ['In progress', str(report.in_progress_orders)],
        ['Pending', str(report.pending_orders)],
        ['Collected', '{} {}'.format(currency, money(report.collected_amount)).strip()],
    ]
    t = Table(summary, colWidths=[2.5 * inch, frame_width - 2.5 * inch])
    t.setStyle(TableStyle([
        ('FONTSIZE', (0, 0), (-1, -1), 10),
        ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
        ('LEFTPADDING', (0, 0), (0, -1), 0),
        ('TOPPADDING', (0, 0), (-1, -1), 3),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 3),
        ('LINEABOVE', (0, -1), (-1, -1), 0.5, border_light),
    ]))
    story.append(t)
    story.append(Spacer(1, 0.25 * inch))

    # ----- Returned inventory -----
    story.append(Paragraph('Returned inventory:', body_style))
    data = [['Code', 'Product', 'Qty', 'Return To', 'Reason']]
    for line in report.inventory_returned or []:
        data.append([
            line.get('productCode') or '—',
            Paragraph(_escape(line.get('productName') or '—'), body_style),
            str(line.get('quantity', 0)),
            line.get('returnType') or '—',
            Paragraph(_escape(line.get('reason') or ''), body_style),
        ])
    if len(data) == 1:
        data.append(['—', 'Nothing returned', '', '', ''])
    col_widths = [0.9 * inch, frame_width - 4.1 * inch, 0.6 * inch, 1.0 * inch, 1.6 * inch]
    t = Table(data, colWidths=col_widths, repeatRows=1)
    t.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 10),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 6),
        ('TOPPADDING', (0, 0), (-1, 0), 6),
        ('ALIGN', (2, 0), (2, -1), 'CENTER'),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('BOX', (0, 0), (-1, -1), 0.5, border_light),
        ('INNERGRID', (0, 0), (-1, -1), 0.25, border_light),
    ]))
    story.append(t)
    story.append(Spacer(1, 0.25 * inch))

    if report.observations:
        story.append(Paragraph('Observations:', body_style))
        story.append(Paragraph(_escape(report.observations).replace('\n', '<br/>'), body_style))
        story.append(Spacer(1, 0.25 * inch))

    story.append(Paragraph('Driver signature: _________________________', body_style))

    doc.build(story)
    buffer.seek(0)
    return buffer.getvalue()


@daily_reports_bp.route('/<int:report_id>/pdf')
@login_required
def pdf(report_id):
    report = db.get_or_404(DailyReport, report_id, description='Daily report not found')
    pdf_bytes = _build_daily_report_pdf(report)
    day = report.date.strftime('%Y%m%d') if report.date else 'undated'
    return send_file(
        BytesIO(pdf_bytes),
        mimetype='application/pdf',
        as_attachment=True,
        download_name=f'Daily_Report_{report.driver_id}_{day}.pdf',
    )
