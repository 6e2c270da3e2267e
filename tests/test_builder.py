from patternday.builder import Car, Scooter, TransportType

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def test_car():
    c = Car()
    c.set_brand("toyota").set_type(TransportType.AUTO).set_color(WHITE).wheel_count()
    assert c.brand == "toyota"
    assert c.kind == TransportType.AUTO
    assert c.color == WHITE
    assert c.wheel == 4


def test_scooter():
    s = Scooter()
    s.set_brand("yamaha").set_type(TransportType.MOTORCYCLE).set_color(BLACK).wheel_count()
    assert s.brand == "yamaha"
    assert s.kind == TransportType.MOTORCYCLE
    assert s.color == BLACK
    assert s.wheel == 2


def test_chain_returns_same_object():
    c = Car()
    assert c.set_brand("x").wheel_count() is c


def test_defaults():
    s = Scooter()
    assert (s.brand, s.color, s.kind, s.wheel) == ("", None, TransportType.AUTO, 0)