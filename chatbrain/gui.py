import pygame

from chatbrain.brain_interface import BrainInterface
from chatbrain.debug_utils import log_error, setup_logging
from chatbrain.ui_components import Button, InputBox, TooltipManager, WHITE, GRAY, BLUE, GREEN, RED

WINDOW_TITLE = "chatbrain"


def wrap_text(font, text, max_width):
    """Break text into lines no wider than max_width. Newlines always break."""
    wrapped_lines = []
    for part in text.split('\n'):
        current = ""
        for ch in part:
            if current and font.size(current + ch)[0] > max_width:
                wrapped_lines.append(current)
                current = ""
            current += ch
        wrapped_lines.append(current)
    return wrapped_lines


def draw_output_area(screen, font, text, area_rect):
    pygame.draw.rect(screen, (30, 30, 30), area_rect)
    pygame.draw.rect(screen, GRAY, area_rect, 2)

    line_height = font.get_linesize()
    lines = wrap_text(font, text, area_rect.width - 10)

    # Only show what fits
    max_visible_lines = max(1, (area_rect.height - 10) // line_height)
    y = area_rect.y + 5
    for line in lines[-max_visible_lines:]:
        # Control characters have no glyph
        printable = "".join(c if c.isprintable() else " " for c in line)
        screen.blit(font.render(printable, True, WHITE), (area_rect.x + 5, y))
        y += line_height


def draw_status_line(screen, font, status_text, area_rect):
    pygame.draw.rect(screen, (20, 20, 20), area_rect)
    pygame.draw.rect(screen, GRAY, area_rect, 1)
    screen.blit(font.render(status_text, True, WHITE), (area_rect.x + 5, area_rect.y + 5))


def run_gui():
    setup_logging()

    pygame.init()
    width = 800
    height = 600
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_TITLE)

    font = pygame.font.SysFont("consolas", 18)
    small_font = pygame.font.SysFont("consolas", 14)

    tooltip_manager = TooltipManager()

    output_rect = pygame.Rect(0, 0, 0, 0)
    status_rect = pygame.Rect(0, 0, 0, 0)

    input_box = InputBox(0, 0, 0, 0, font=font, tooltip="Type a message for the brain")
    send_button = Button(0, 0, 100, 40, "Send", color=BLUE, tooltip="Send the message, one character at a time")
    reward_button = Button(0, 0, 100, 40, "Reward", color=GREEN, tooltip="Reward the brain")
    punish_button = Button(0, 0, 100, 40, "Punish", color=RED, tooltip="Punish the brain")
    buttons = [send_button, reward_button, punish_button]

    def update_layout(w, h):
        layout_w = max(w, 500)
        layout_h = max(h, 300)

        padding = 15
        input_height = 50
        status_height = 30
        button_width = 100

        status_rect.update(padding, layout_h - status_height - padding, layout_w - (padding * 2), status_height)

        input_y = padding
        input_box.rect.update(padding, input_y, layout_w - (padding * 2), input_height)

        button_y = input_box.rect.bottom + padding
        x = padding
        for btn in buttons:
            btn.rect.update(x, button_y, button_width, 40)
            x += button_width + padding

        output_y = button_y + 40 + padding
        output_rect.update(padding, output_y, layout_w - (padding * 2), status_rect.top - padding - output_y)

    update_layout(width, height)

    interface = BrainInterface()
    status_text = interface.status_message

    # --- Actions ---
    def on_send():
        nonlocal status_text
        text = input_box.text
        try:
            interface.send_text(text)
            input_box.set_text("")
            status_text = f"Sent {len(text) + 1} characters."
        except ValueError as error:
            log_error(f"Rejected message: {error}")
            status_text = "Error: " + str(error)

    def on_feedback(give):
        nonlocal status_text
        try:
            give()
        except NotImplementedError as error:
            log_error(str(error))
            status_text = "Error: " + str(error)

    send_button.action = on_send
    input_box.on_submit = on_send
    reward_button.action = lambda: on_feedback(interface.reward)
    punish_button.action = lambda: on_feedback(interface.punish)

    interface.start()

    clock = pygame.time.Clock()
    running = True

    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    width, height = event.w, event.h
                    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
                    update_layout(width, height)

                input_box.handle_event(event)
                for btn in buttons:
                    btn.handle_event(event)

            # Hover Checks
            mouse_pos = pygame.mouse.get_pos()
            hovered_element = None
            if input_box.check_hover(mouse_pos):
                hovered_element = input_box
            for btn in buttons:
                if btn.check_hover(mouse_pos):
                    hovered_element = btn
            tooltip_manager.update(hovered_element)

            # Drawing
            screen.fill((15, 15, 15))
            input_box.draw(screen, font)
            for btn in buttons:
                btn.draw(screen, font)
            draw_output_area(screen, font, interface.get_output_text(), output_rect)

            # Worker errors win over the last action's status
            if interface.last_error is not None:
                status_text = interface.status_message
            draw_status_line(screen, small_font, status_text, status_rect)

            tooltip_manager.draw(screen, small_font)

            pygame.display.flip()
            clock.tick(30)
    finally:
        interface.stop()
        pygame.quit()


if __name__ == "__main__":
    run_gui()
