# ui/app.py
from __future__ import annotations

import gradio as gr

from ui.styles import CSS
from ui.actions import send_message, clear_history, refresh_mode, update_history_display
from ui.api import mode_badge


def create_app():
    with gr.Blocks(css=CSS, title="Folio Chat") as demo:
        history = gr.State([])

        with gr.Row():
            gr.Markdown("<h1 style='margin:0'>Ask about Rayhan's DevOps work</h1>")
            badge = gr.HTML(mode_badge(None))

        chat_md = gr.Markdown(update_history_display([]), elem_classes=["chat-log"])

        with gr.Row():
            box = gr.Textbox(
                placeholder="e.g., What are your rates?",
                show_label=False,
                scale=5,
            )
            send_btn = gr.Button("Send", scale=1)
            clear_btn = gr.Button("Clear", elem_classes=["clear-btn"], scale=1)

        outputs = [box, history, chat_md, badge]
        box.submit(fn=send_message, inputs=[box, history], outputs=outputs, show_progress=False)
        send_btn.click(fn=send_message, inputs=[box, history], outputs=outputs, show_progress=False)
        clear_btn.click(fn=clear_history, outputs=[history, chat_md], show_progress=False)

        # Badge reflects a fresh /health probe on each page load
        demo.load(fn=refresh_mode, outputs=[badge], show_progress=False)

        demo.queue()

    return demo


if __name__ == "__main__":
    demo = create_app()
    demo.launch()
