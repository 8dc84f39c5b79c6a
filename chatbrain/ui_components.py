import pygame

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (200, 200, 200)
DARK_GRAY = (100, 100, 100)
BLUE = (0, 0, 255)
GREEN = (0, 200, 0)
RED = (200, 50, 50)

class TooltipManager:
    def __init__(self):
        self.hovered_element = None
        self.hover_start_time = 0
        self.delay = 500 # ms

    def update(self, element):
        if element != self.hovered_element:
            self.hovered_element = element
            self.hover_start_time = pygame.time.get_ticks()

    def draw(self, screen, font):
        element = self.hovered_element
        if element is None or not getattr(element, 'tooltip', None):
            return
        if pygame.time.get_ticks() - self.hover_start_time <= self.delay:
            return

        mouse_pos = pygame.mouse.get_pos()
        text_surf = font.render(element.tooltip, True, BLACK)
        bg_rect = text_surf.get_rect()
        bg_rect.topleft = (mouse_pos[0] + 15, mouse_pos[1] + 15)
        bg_rect.width += 10
        bg_rect.height += 6

        # Keep on screen
        if bg_rect.right > screen.get_width():
            bg_rect.right = mouse_pos[0] - 5
        if bg_rect.bottom > screen.get_height():
            bg_rect.bottom = mouse_pos[1] - 5

        pygame.draw.rect(screen, (255, 255, 220), bg_rect)
        pygame.draw.rect(screen, BLACK, bg_rect, 1)
        screen.blit(text_surf, (bg_rect.x + 5, bg_rect.y + 3))

class Button:
    def __init__(self, x, y, width, height, text, action=None, color=DARK_GRAY, tooltip=None):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.action = action
        self.color = color
        self.tooltip = tooltip
        self.is_hovered = False

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN:
            if self.is_hovered and self.action:
                self.action()

    def check_hover(self, mouse_pos):
        self.is_hovered = self.rect.collidepoint(mouse_pos)
        return self.is_hovered

    def draw(self, screen, font):
        color = self.color
        if self.is_hovered:
            color = tuple(min(255, c + 30) for c in self.color)

        pygame.draw.rect(screen, color, self.rect, border_radius=5)
        pygame.draw.rect(screen, BLACK, self.rect, 2, border_radius=5)

        text_surf = font.render(self.text, True, WHITE)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)

class InputBox:
    """Single-line text entry. Enter calls `on_submit` if one is set."""

    def __init__(self, x, y, width, height, font=None, text='', text_color=WHITE, cursor_color=WHITE, tooltip=None, on_submit=None):
        self.rect = pygame.Rect(x, y, width, height)
        self.color = GRAY
        self.text = text
        self.font = font
        self.text_color = text_color
        self.cursor_color = cursor_color
        self.tooltip = tooltip
        self.on_submit = on_submit
        self.active = False
        self.is_hovered = False
        self.txt_surface = None
        self._render()

    def _render(self):
        if self.font:
            self.txt_surface = self.font.render(self.text, True, self.text_color)

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.active = self.rect.collidepoint(event.pos)
            self.color = WHITE if self.active else GRAY
        if event.type == pygame.KEYDOWN and self.active:
            if event.key == pygame.K_RETURN:
                if self.on_submit:
                    self.on_submit()
                return
            elif event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            else:
                self.text += event.unicode
            self._render()

    def check_hover(self, mouse_pos):
        self.is_hovered = self.rect.collidepoint(mouse_pos)
        return self.is_hovered

    def set_text(self, text):
        self.text = text
        self._render()

    def draw(self, screen, font=None):
        pygame.draw.rect(screen, (50, 50, 50), self.rect)
        if self.txt_surface:
            screen.blit(self.txt_surface, (self.rect.x + 5, self.rect.y + 10))
        pygame.draw.rect(screen, self.color, self.rect, 2)

        if self.active and self.txt_surface:
            cursor_x = self.rect.x + 5 + self.txt_surface.get_width()
            cursor_y = self.rect.y + 5
            pygame.draw.line(screen, self.cursor_color, (cursor_x, cursor_y), (cursor_x, cursor_y + self.rect.height - 10), 2)
