# patternkit

A compact collection of the classic object-oriented design patterns. Each
pattern is a small self-contained module that you can read, import and run.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Family                  | Modules                                              |
|-------------------------|------------------------------------------------------|
| Behaviour change        | `command`, `visitor`                                 |
| Component collaboration | `observer`, `strategy`                               |
| Data structures         | `chain`, `composite`, `iterator`                     |
| Domain problems         | `interpreter`                                        |
| Interface isolation     | `adapter`, `facade`, `mediator`, `proxy`             |
| Object creation         | `builder`, `factory`, `prototype`                    |
| Object performance      | `flyweight`, `singleton`                             |
| Single responsibility   | `bridge`, `messenger`, `decorator`                   |
| State change            | `memento`, `state`                                   |

## Running the demonstrations

Every module has a `main()` that walks through one fixed scenario, prints
what happens to standard output and returns 0. Each is installed as a
command of the form `patternkit-<module>`, for example:

```
patternkit-observer
patternkit-strategy
patternkit-chain
patternkit-messenger
```

The full list is `patternkit-command`, `patternkit-visitor`,
`patternkit-observer`, `patternkit-strategy`, `patternkit-chain`,
`patternkit-composite`, `patternkit-iterator`, `patternkit-interpreter`,
`patternkit-adapter`, `patternkit-facade`, `patternkit-mediator`,
`patternkit-proxy`, `patternkit-builder`, `patternkit-factory`,
`patternkit-prototype`, `patternkit-flyweight`, `patternkit-singleton`,
`patternkit-bridge`, `patternkit-messenger`, `patternkit-decorator`,
`patternkit-memento` and `patternkit-state`.

## Using the modules

Swapping tax rules at run time with the strategy pattern (`CNTax`, `USTax`,
`JPTax` and `DETax` apply flat rates of 0.3, 0.18, 0.16 and 0.43):

```python
from patternkit.strategy import CNTax, TaxContext, USTax

context = TaxContext(CNTax())
print(context.calculate_tax(1000.0))   # 300.0
context.strategy = USTax()
```

Fitting an old interface to a new one:

```python
from patternkit.adapter import Adaptee, Adapter

print(Adapter(Adaptee()).request())   # Special behavior of the Adaptee.
```

Subscribing to changes; setting `ConcreteSubject.state` notifies every
attached observer, which copies the new value into its own `state`:

```python
from patternkit.observer import ConcreteObserver, ConcreteSubject

subject = ConcreteSubject()
watcher = ConcreteObserver(subject)
subject.attach(watcher)
subject.state = 10        # prints "Observer State Updated: 10"
print(watcher.state)      # 10
subject.detach(watcher)
```

Passing requests along a chain of handlers (`ConcreteHandler1` takes
requests below 10, `ConcreteHandler2` takes 10 and above):

```python
from patternkit.chain import ConcreteHandler1, ConcreteHandler2

first = ConcreteHandler1(successor=ConcreteHandler2())
for request in (5, 20, 15, 2, 8):
    first.handle_request(request)
```

Walking a collection with the iterator pattern; `ConcreteCollection` holds
the integers one to five and is itself iterable:

```python
from patternkit.iterator import ConcreteCollection

print(list(ConcreteCollection()))   # [1, 2, 3, 4, 5]
```

Separating what a messenger does from the platform it runs on:

```python
from patternkit.messenger import MessagerPerfect, PCMessagerImp

messenger = MessagerPerfect(PCMessagerImp())
password = "password"
messenger.login("user", password)
messenger.send_message("Hello, World!")
messenger.send_picture("Image.png")
```

Saving and restoring state:

```python
from patternkit.memento import Caretaker, Originator

originator = Originator("State1")
caretaker = Caretaker()
caretaker.save_memento(originator.create_memento())
originator.state = "State2"
originator.restore(caretaker.memento)
print(originator.state)   # State1
```

Sharing one instance: `Singleton()` raises `TypeError`; use
`Singleton.get_instance()`, which always returns the same object, even when
copied.

## What it does not do

The demonstration commands take no options and ignore any arguments they are
given; each runs only its fixed scenario. The patterns are illustrations:
their operations print a line describing what they do rather than doing real
work, and nothing is stored or sent anywhere.

Each module's docstrings describe its classes; the tests in `tests/` show the
expected behaviour of every pattern.