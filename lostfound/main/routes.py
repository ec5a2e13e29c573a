from flask import current_app, render_template, url_for

from lostfound.constants import CATEGORIES, REPORTER_STATUSES
from . import main


@main.route('/')
def index():
    return render_template('home.html', active_page='home')


@main.route('/prosedur')
def procedure():
    return render_template('prosedur.html', active_page='prosedur')


def _render_report_form(template, submit_endpoint):
    return render_template(
        template,
        active_page=template.rsplit('.', 1)[0],
        categories=CATEGORIES,
        reporter_statuses=REPORTER_STATUSES,
        submit_url=url_for(submit_endpoint),
        variant=current_app.config['REPORT_VARIANT'],
    )


@main.route('/form-penemuan')
def found_form():
    return _render_report_form('form-penemuan.html', 'reports.submit_found_report')


@main.route('/form-kehilangan')
def lost_form():
    return _render_report_form('form-kehilangan.html', 'reports.submit_lost_report')
