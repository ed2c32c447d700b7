import sys

BACKGROUND = "#0b0f14"
TEXT = "#e7eef7"
ACCENT = "#00ff9d"
ACTIVE = "#7c74bd"

FONT = {"darwin": "Helvetica Neue", "win32": "Segoe UI"}.get(sys.platform, "DejaVu Sans")

APP_QSS = f"""
QWidget {{
    background: {BACKGROUND};
    color: {TEXT};
    font-family: "{FONT}", "Arial";
    font-size: 14px;
}}
QLabel#muted {{ color: rgba(231,238,247,0.70); }}

QPushButton {{
    background: #1f2937;
    border: 1px solid rgba(255,255,255,0.10);
    border-radius: 12px;
    padding: 10px 14px;
    font-weight: 600;
}}
QPushButton:hover {{ background: #263244; }}
QPushButton:checked {{ background: {ACTIVE}; color: {BACKGROUND}; }}
QPushButton:disabled {{ background: #141b24; color: rgba(231,238,247,0.30); }}

QProgressBar {{
    border: 1px solid rgba(255,255,255,0.10);
    border-radius: 10px;
    background: rgba(255,255,255,0.06);
    height: 26px;
}}
QProgressBar::chunk {{ border-radius: 10px; background: {ACCENT}; }}
"""
