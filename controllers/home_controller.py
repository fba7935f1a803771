from flask import render_template  # Rendering dei template in views/


def top():
    """Serves the top page."""
    # Rende top.html situato in views/; eventuali errori passano alla catena degli errori
    return render_template("top.html")
