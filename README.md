# patternday

A collection of small, self-contained examples of the classic design
patterns, one module per pattern. Each module is short enough to read in one
sitting and comes with tests that show the pattern at work.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Pattern | Main names |
| --- | --- | --- |
| `patternday.simple_factory` | Simple factory | `new_phone`, `Iphone`, `Android` |
| `patternday.factory_method` | Factory method | `create_factory`, `PhoneKind`, `HTC`, `ASUS` |
| `patternday.abstract_factory` | Abstract factory | `get_sports_factory`, `Adidas`, `Nike`, `Shoe`, `Shirt` |
| `patternday.builder` | Builder | `Car`, `Scooter`, `TransportType` |
| `patternday.prototype` | Prototype | `Basic.clone`, `Basic.copy` |
| `patternday.singleton` | Singleton | `new_service`, `Service` |
| `patternday.adapter` | Adapter | `Client`, `Mac`, `Windows`, `Adapter` |
| `patternday.bridge` | Bridge | `Asus`, `Nokia`, `Game`, `Directory` |
| `patternday.combination` | Composite | `File`, `Folder` |
| `patternday.decorator` | Decorator | `Coffee`, `Milk`, `BlackTea` |
| `patternday.facade` | Facade | `DataStore`, `Database`, `Cache` |
| `patternday.flyweight` | Flyweight | `get_equipment_factory`, `Game`, `new_role` |
| `patternday.proxy` | Proxy | `Proxy`, `JPServer` |
| `patternday.chain_of_responsibility` | Chain of responsibility | `Director`, `Manager`, `GeneralManager`, `Request` |
| `patternday.command` | Command | `Control`, `OnCommand`, `OffCommand`, `Button` |
| `patternday.interpret` | Interpreter | `Operate`, `AndOperate`, `OrOperate` |
| `patternday.iterator` | Iterator | `Student`, `StudentIterator` |
| `patternday.mediation` | Mediator | `UIMediator`, `PM`, `RD` |
| `patternday.memento` | Memento | `Role`, `Memento`, `Caretaker` |
| `patternday.observer` | Observer | `NewsOffice`, `CustomerA`, `CustomerB` |
| `patternday.state` | State | `Month`, `MonthState` |
| `patternday.strategy` | Strategy | `Weather`, `WeatherKind`, `Sun`, `Rain` |
| `patternday.template` | Template method | `play`, `AgeOfEmpires`, `Starcraft` |
| `patternday.visitor` | Visitor | `Element`, `Env`, `Dev`, `Prod`, `Qa` |

## A few examples

Decorator: each topping wraps a drink and adds to its cost and description.

```python
from patternday.decorator import Coffee, Milk, BlackTea

drink = BlackTea(Milk(Coffee("American Coffee"), "Milk"), "Black Tea")
drink.description()   # "American Coffee, Milk, Black Tea"
drink.cost()          # 115
```

Factory method: pick a factory by kind, then let it build the phone. An
unknown kind gets the HTC Taiwan factory.

```python
from patternday.factory_method import PhoneKind, create_factory

create_factory(PhoneKind.ASUS_CHINA).create().market()
# "Your ASUS Phone made in China"
```

Chain of responsibility: a request climbs the chain until someone may
approve it. The director approves counts below 5, the manager counts below
10, and the general manager everything else.

```python
from patternday.chain_of_responsibility import (
    Director, GeneralManager, Manager, Request,
)

director = Director()
manager = Manager()
manager.set_manager(GeneralManager())
director.set_manager(manager)

request = Request(9)
director.allow(request)
request.manager_allow   # True
```

Strategy: the weather decides how umbrellas are priced.

```python
from patternday.strategy import Weather, WeatherKind

Weather(WeatherKind.SUN).sell(1)   # 5.0
Weather(WeatherKind.RAIN).sell(1)  # 10
```

Flyweight: every role of a kind shares one equipment object.

```python
from patternday.flyweight import get_equipment_factory, new_role

new_role("T", "saber").equipment is new_role("T", "saber").equipment  # True
get_equipment_factory().get_equipment("saber").color                 # "red"
```

Several examples (adapter, bridge, chain of responsibility, composite,
facade, mediator, observer, template method, visitor) also print a line for
each step they take, so you can watch the pattern run.

## What it does not do

This is a library of examples only. It has no command-line program and no
entry point; import the modules and call them from your own code or from the
tests. The facade's `Database` and `Cache` only print what they would do and
store nothing.