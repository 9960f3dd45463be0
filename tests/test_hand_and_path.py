import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mexitrain.errors import InvalidHandIndexError
from mexitrain.hand import Hand
from mexitrain.path import Path
from mexitrain.tiles import Domino, Element


def test_hand_remove_returns_new_hand():
    hand = Hand.from_iterable([Domino(1, 2), Domino(3, 4), Domino(5, 6)])
    domino, rest = hand.remove(1)

    assert domino == Domino(3, 4)
    assert list(rest) == [Domino(1, 2), Domino(5, 6)]
    assert len(hand) == 3


def test_hand_remove_out_of_range():
    hand = Hand.from_iterable([Domino(1, 2)])
    with pytest.raises(InvalidHandIndexError):
        hand.remove(1)
    with pytest.raises(InvalidHandIndexError):
        hand.remove(-1)
    with pytest.raises(InvalidHandIndexError):
        Hand().remove(0)


def test_hand_add_and_total():
    hand = Hand().add(Domino(2, 3)).add(Domino(4, 4))
    assert len(hand) == 2
    assert hand.total() == 13


def test_mexican_path_is_unowned_train():
    path = Path.mexican_path()
    assert path.owner is None
    assert path.train
    assert path.open_to("anyone")

    assert Path(mexican=True).train
    with pytest.raises(ValueError):
        Path(owner="A", mexican=True)


def test_private_path_only_open_to_owner():
    path = Path(owner="A")
    assert path.open_to("A")
    assert not path.open_to("B")
    path.train = True
    assert path.open_to("B")


def test_empty_path_matches_center():
    path = Path(owner="A")
    center = Domino(6, 6)
    assert path.accepts(Domino(6, 1), center)
    assert path.accepts(Domino(1, 6), center)
    assert not path.accepts(Domino(2, 3), center)
    assert not path.accepts(Domino(6, 1), None)


def test_single_element_path_without_center():
    path = Path(owner="A", elements=[Element(Domino(6, 1))])
    assert path.exposed_value(None) == 1
    assert path.accepts(Domino(1, 4), None)
    assert not path.accepts(Domino(6, 4), None)


def test_exposed_value_follows_chain():
    center = Domino(6, 6)
    path = Path(owner="A", elements=[Element(Domino(6, 1)), Element(Domino(1, 4))])
    assert path.exposed_value(center) == 4
    assert path.accepts(Domino(4, 0), center)
    assert not path.accepts(Domino(1, 0), center)


def test_flip_only_inferred_off_a_double():
    center = Domino(6, 6)
    path = Path(owner="A")
    assert path.element_for(Domino(1, 6), center).flipped
    assert not path.element_for(Domino(6, 1), center).flipped

    path.append(Element(Domino(6, 3)))
    path.append(Element(Domino(3, 3)))
    assert path.element_for(Domino(5, 3), center).flipped
    assert not path.element_for(Domino(3, 5), center).flipped

    plain = Path(owner="A", elements=[Element(Domino(6, 2))])
    assert not plain.element_for(Domino(4, 2), center).flipped


def test_flip_does_not_change_matching():
    center = Domino(6, 6)
    path = Path(owner="A", elements=[Element(Domino(6, 2), flipped=True)])
    assert path.exposed_value(center) == 2


def test_path_display_marks_train_and_dangling():
    path = Path(owner="A", train=True, elements=[Element(Domino(6, 2))])
    text = path.display(unresolved=True)
    assert "0:[6|2]" in text
    assert text.endswith("* <!>")
    assert Path.mexican_path().display().strip().startswith("M >>")
