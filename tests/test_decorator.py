from patternday.decorator import BlackTea, Coffee, Milk


def test_milk_coffee():
    c = Milk(Coffee("American Coffee"), "Milk")
    assert c.description() == "American Coffee, Milk"
    assert c.cost() == 110


def test_double_milk_coffee():
    c = Milk(Milk(Coffee("American Coffee"), "Milk"), "Milk")
    assert c.description() == "American Coffee, Milk, Milk"
    assert c.cost() == 120


def test_black_tea_milk_coffee():
    c = BlackTea(Milk(Coffee("American Coffee"), "Milk"), "Black Tea")
    assert c.description() == "American Coffee, Milk, Black Tea"
    assert c.cost() == 115


def test_plain_coffee():
    c = Coffee("Espresso")
    assert c.description() == "Espresso"
    assert c.cost() == 100