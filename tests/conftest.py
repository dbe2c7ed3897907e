import pytest

DECK_TEXT = (
    "Acme Robotics\nFounded 2021\nMission: automate warehouses"
    "\f"
    "The Problem\n- Pickers walk 12 miles per shift\n- Labor shortage is a major challenge"
    "\f"
    "Team\n- Jane Doe, CEO, ex-Amazon\n- John Roe, CTO, robotics background\n- Advisors from MIT"
    "\f"
    "Funding\nWe are raising $5M seed capital\nInvestors: Example Ventures"
)


@pytest.fixture
def deck_text():
    return DECK_TEXT


@pytest.fixture
def deck_file(tmp_path):
    path = tmp_path / "deck.txt"
    path.write_text(DECK_TEXT, encoding="utf-8")
    return path
