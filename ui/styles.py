# ui/styles.py

CSS = """
/* ---- Base theme ---- */
body {
    background-color: #1f1f2e;
    color: #f5f5f5;
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
}

.gradio-container {
    border-radius: 12px;
    padding: 20px;
    max-width: 860px !important;
}

/* ---- Chat log ---- */
.chat-log {
    background-color: #2c2c3e;
    border-radius: 8px;
    padding: 16px;
    min-height: 320px;
    white-space: pre-wrap;
}

/* ---- Buttons ---- */
.gr-button {
    background-color: #4f46e5;
    color: white;
    border-radius: 8px;
    border: none;
    font-weight: bold;
    min-height: 40px;
}
.gr-button:hover { background-color: #6366f1; }
.clear-btn { background-color: #dc2626 !important; }

/* ---- Mode badge ---- */
.mode-badge {
    display: inline-block;
    padding: 2px 10px;
    border-radius: 999px;
    font-size: 0.85em;
    font-weight: 600;
}
.mode-ai    { background: #064e3b; color: #6ee7b7; }
.mode-rules { background: #1e3a8a; color: #93c5fd; }
.mode-down  { background: #7f1d1d; color: #fecaca; }
"""
