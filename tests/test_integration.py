"""End-to-end programs through the public ``macaca`` API."""

import pytest

import macaca
from macaca import Environment
from macaca.object import Integer, String, Array, EvaluationError


MAP_REDUCE = """
let map = fn(arr, f) {
	let iter = fn(arr, accumulated) {
		if (len(arr) == 0) {
			accumulated
		} else {
			iter(rest(arr), push(accumulated, f(first(arr))));
		}
	};
	iter(arr, []);
};

let reduce = fn(arr, initial, f) {
	let iter = fn(arr, result) {
		if (len(arr) == 0) {
			result
		} else {
			iter(rest(arr), f(result, first(arr)));
		}
	};
	iter(arr, initial);
};

let sum = fn(arr) {
	reduce(arr, 0, fn(initial, el) { initial + el });
};
"""


def _values(array):
	assert isinstance(array, Array), array.inspect()
	return [e.value for e in array.elements]


def test_map():
	result = macaca.run(MAP_REDUCE + "let double = fn(x) { x * 2 }; map([1, 2, 3, 4], double);")
	assert _values(result) == [2, 4, 6, 8]


def test_reduce_sum():
	result = macaca.run(MAP_REDUCE + "sum([1, 2, 3, 4, 5]);")
	assert isinstance(result, Integer)
	assert result.value == 15


def test_library_loaded_into_shared_environment():
	env = Environment()
	macaca.run(MAP_REDUCE, env)
	assert macaca.run("sum(map([1, 2, 3], fn(x) { x * x }))", env).value == 14
	assert macaca.run("map([], fn(x) { x })", env).inspect() == "[]"


def test_hash_of_people():
	source = """
	let people = [{"name": "Alice", "age": 24}, {"name": "Anna", "age": 28}];
	let getName = fn(person) { person["name"]; };
	getName(people[0]) + " & " + getName(people[1]);
	"""
	result = macaca.run(source)
	assert isinstance(result, String)
	assert result.value == "Alice & Anna"


def test_counter_through_closures():
	source = """
	let makeCounter = fn(start) {
		let step = fn(n) { { "value": n, "next": fn() { step(n + 1) } } };
		step(start);
	};
	let c = makeCounter(10);
	let c = c["next"]();
	let c = c["next"]();
	c["value"];
	"""
	assert macaca.run(source).value == 12


def test_recursive_fibonacci():
	source = """
	let fibonacci = fn(x) {
		if (x == 0) { 0 } else { if (x == 1) { return 1; } else { fibonacci(x - 1) + fibonacci(x - 2); } }
	};
	fibonacci(10);
	"""
	assert macaca.run(source).value == 55


def test_error_surfaces_from_deep_call():
	source = MAP_REDUCE + 'map([1, "two", 3], fn(x) { x * 2 });'
	result = macaca.run(source)
	assert isinstance(result, EvaluationError)
	assert result.message == "type mismatch: STRING * INTEGER"


def test_program_stops_at_first_error(capsys):
	result = macaca.run('puts("before"); let x = nope; puts("after");')
	assert isinstance(result, EvaluationError)
	assert capsys.readouterr().out == "before\n"


def test_budget_through_public_api():
	result = macaca.run("let f = fn() { f() }; f()", max_steps=500)
	assert result.inspect() == "ERROR: evaluation budget exceeded: 500 steps"


def test_parse_failure_raises():
	with pytest.raises(macaca.ParserErrors):
		macaca.run("let x = ;")
