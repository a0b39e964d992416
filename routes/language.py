# routes/language.py

from flask import Blueprint, current_app, redirect, request, session, url_for

language_bp = Blueprint('language', __name__)


@language_bp.route('/change-language/<lang_code>')
def change_language(lang_code):
    # only languages the catalog ships with
    if lang_code in current_app.config["LANGUAGES"]:
        session['lang'] = lang_code
    return redirect(request.referrer or url_for('catalog.index'))
