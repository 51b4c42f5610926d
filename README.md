# querygen

Typed column fields that turn method calls into parameterised SQL
fragments. The package also has small helpers for struct tags, import
lists and dynamic `WHERE`/`SET` clauses, which query-code generators use.

## Install

```
pip install querygen
```

To run the test suite:

```
pip install "querygen[test]"
pytest
```

## Expressions and fields

`querygen.expression` holds the building blocks:

- `Column(table, name)` is a column reference. `to_sql()` renders it as a
  quoted identifier, for example `"users"."age"`.
- `Expr(sql, vars)` is a SQL fragment with `?` placeholders. `build()`
  returns the SQL text and the list of bound parameters. Nested
  expressions, columns and fields are rendered inline.
- `Assign(column, value)` is a `column = value` assignment, as produced by
  `value()`.
- `compare(op, column, value)`, `in_values(column, values)` and
  `negate(expr)` build comparisons, `IN (...)` lists and `NOT (...)`.
  Comparing to `None` with `=` or `<>` gives `IS NULL` or `IS NOT NULL`.
  An empty `IN` list renders as `IN (NULL)`.

`BaseField(table, column)` is the base of every field. Its methods are
`eq`, `neq`, `gt`, `gte`, `lt`, `lte`, `in_`, `not_in`, `between`,
`not_between`, `like`, `not_like`, `value`, `if_null` (rendered as
`COALESCE`) and `sum`. `BaseField.from_expr(expr)` makes a field that
stands for an arbitrary expression. Use `BaseField` directly for columns
that have no dedicated type.

```python
from querygen.numeric import Int64

age = Int64("users", "age")

age.between(18, 65).build()
# ('"users"."age" BETWEEN ? AND ?', [18, 65])

age.add(1).gt(30).build()
# ('"users"."age" + ? > ?', [1, 30])

Int64("", "age").zero().build()
# ('"age" = ?', [0])
```

### Integer fields

`querygen.numeric` provides `Int`, `Int8`, `Int16`, `Int32` and `Int64`.
Their arithmetic and bitwise methods return a field of the same type, so
you can keep chaining calls:

- `add`, `sub`, `mul`, `div`, `mod`, `floor_div` (`DIV`)
- `bit_and`, `bit_or`, `bit_xor`, `bit_flip` (`~`), `left_shift`,
  `right_shift`
- `zero()` assigns `0`.
- `field(*values)` renders `FIELD(column, v1, ...)`.

### PostgreSQL fields

`querygen.pgtypes` provides the following fields:

- `Money`, which has the base comparisons only.
- `XML`, which adds `regexp` and `not_regexp`.
- `RangeField` and its subclasses `DateRange`, `Int4Range`, `Int8Range`,
  `NumRange`, `TsRange` and `TstzRange`. They offer `overlaps` (`&&`),
  `contains` (`@>`), `contained_by` (`<@`), `strict_left` (`<<`),
  `strict_right` (`>>`) and `adjacent` (`-|-`).

```python
from querygen.pgtypes import DateRange

DateRange("bookings", "during").overlaps("[2024-01-01,2024-02-01)").build()
# ('"bookings"."during" && ?', ['[2024-01-01,2024-02-01)'])
```

## Struct tags

`querygen.tag` has two tag builders:

- `Tag` maps each key to a single value.
- `GormTag` maps each key to a list of values.

Both have `set`, `remove` and `build`, and `GormTag` also has `append`.
Keys are ordered by a fixed priority: `gorm`, `json`, `column`, `type`,
`primaryKey`, and so on. `sort_keys` applies that order. Keys with the
same priority are ordered alphabetically.

```python
from querygen.tag import Tag, GormTag

Tag().set("json", "id").set("gorm", "column:id").build()
# 'gorm:"column:id" json:"id"'

GormTag().set("column", "id").set("primaryKey").build()
# 'column:id;primaryKey'
```

## Dynamic clauses

`querygen.sqlclause` has the following helpers:

- `where_clause` joins conditions with `AND`, unless a condition already
  starts with `AND`, `OR` or `XOR`.
- `set_clause` joins assignments with commas.
- `if_clause` keeps the result of each `Cond` whose condition is true.
- `trim_all`, `join_where`, `join_set` and `join_trim_all` strip a dangling
  connector or comma from either end of the text.

```python
from querygen.sqlclause import where_clause, set_clause

where_clause(["name = ?", "or age > ?"])   # ' WHERE name = ? or age > ?'
set_clause(["name = ?,", "age = ?"])        # ' SET name = ?,age = ?'
```

## Imports and objects

`querygen.imports.ImportPaths` keeps an ordered list of quoted import
paths. `add()` returns a new instance with one group appended. Paths that
are already present are skipped, and blank entries separate groups.
`IMPORT_LIST` and `UNIT_TEST_IMPORT_LIST` are the default lists.

`querygen.objects` describes a model by hand with the dataclasses `Object`
and `ObjectField`. `check_object` raises `ValueError` when the struct name,
or any field's name or type, is empty.

## What it does not do

querygen only builds SQL text and parameters. It does not:

- connect to a database or run queries;
- read table schemas;
- write generated source files.

There are no dedicated field types for text, date/time, JSON or network
columns. Use `BaseField` for those.