"""
Pages du site rendues côté serveur + fichiers statiques (assets, data)
"""

from datetime import datetime

from flask import (
    abort,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    send_from_directory,
    url_for,
)
from flask_babel import _

from . import site_bp
from .forms import ContactForm
from client.content_loader import ContentLoader
from client.theme import Logo, LogoSwapper, ThemeState, file_probe
from managers.contact_manager import contact_manager
from managers.content_manager import ContentManager

LOGO_SRC = "../assets/images/logo.png"

# documents utilisés par chaque page
PAGES = {
    "index": ("about", "services", "projects"),
    "about": ("about", "team"),
    "services": ("services",),
    "projects": ("projects",),
    "team": ("team",),
    "software": ("software",),
}


# ===============================
# UTILITAIRES
# ===============================
def load_regions(keys):
    """Fragments HTML des sections ; une section sans document reste vide"""
    store = ContentManager(current_app.config["CONTENT_DIR"])
    return ContentLoader(fetch=store.load).load_regions(keys)


def render_page(page: str, title: str):
    return render_template(f"{page}.html", title=title, regions=load_regions(PAGES[page]))


@site_bp.app_context_processor
def inject_presentation():
    """Classe de thème + logo selon la préférence annoncée par le navigateur"""
    hint = request.headers.get("Sec-CH-Prefers-Color-Scheme", "").strip('" ').lower()
    state = ThemeState(prefers_dark=hint == "dark")
    state.apply_system_theme()

    swapper = LogoSwapper(file_probe(current_app.config["ASSETS_DIR"]))
    logo = swapper.apply(Logo(LOGO_SRC), state)

    return dict(
        theme_class=" ".join(sorted(state.classes)),
        logo_src=logo.src,
        current_year=datetime.now().year,
        site_name=current_app.config["NAME"],
    )


# ===============================
# PAGES
# ===============================
@site_bp.route("/")
def index():
    return render_page("index", _("Home"))


@site_bp.route("/about")
def about():
    return render_page("about", _("About"))


@site_bp.route("/services")
def services():
    return render_page("services", _("Services"))


@site_bp.route("/projects")
def projects():
    return render_page("projects", _("Projects"))


@site_bp.route("/team")
def team():
    return render_page("team", _("Team"))


@site_bp.route("/software")
def software():
    return render_page("software", _("Software"))


# ===============================
# ROUTE CONTACT
# ===============================
@site_bp.route("/contact", methods=["GET", "POST"])
def contact():
    form = ContactForm()
    error = None

    if request.method == "POST":
        if form.validate_on_submit():
            contact_manager.append({
                "name": form.name.data,
                "email": form.email.data,
                "message": form.message.data,
            })
            flash(_("Message received (demo)"), "success")
            # post/redirect/get : le formulaire revient vide
            return redirect(url_for("site.contact"))

        # les valeurs saisies restent dans le formulaire
        error = _("Please fill all fields.")

    return render_template("contact.html", title=_("Contact"), form=form, error=error)


# ===============================
# FICHIERS STATIQUES
# ===============================
@site_bp.route("/assets/<path:filename>")
def assets(filename):
    return send_from_directory(current_app.config["ASSETS_DIR"], filename)


@site_bp.route("/data/<path:filename>")
def data(filename):
    """Documents de contenu bruts, lus par le client HTTP"""
    if not filename.endswith(".json"):
        abort(404)
    return send_from_directory(
        current_app.config["CONTENT_DIR"],
        filename,
        mimetype="application/json",
    )
