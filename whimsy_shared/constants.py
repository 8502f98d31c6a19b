# whimsy_shared/constants.py

APP_TITLE = "Whimsical Discs"
WIDTH, HEIGHT = 1000, 600
FPS = 60

WHITE = (245, 245, 245)

BACKGROUND = WHITE
FPS_TEXT_COLOR = "#2D3E50"

PALETTE = (
    "#F89B2A",
    "#C4473D",
    "#EAD046",
    "#2D3E50",
    "#2E2E2E",
    "#FF5F87",
    "#A54A00",
    "#F6C945",
    "#247BA0",
    "#6E5A8A",
    "#B81E3E",
    "#F9D54C",
    "#CC2A2B",
    "#E57E2F",
    "#1E1E1E",
    "#453327",
    "#AF835C",
)
