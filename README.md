# circuit_structure

Data structures and passes for holding arithmetic-circuit programs
(templates and functions) as a syntax tree, ready for analysis.

## Modules

- `circuit_structure.meta` – `Meta` records a node's `start`, `end`,
  `location` (a `range`), `file_id` and `elem_id`. `require_file_id()` raises
  `ValueError` when no file id is set. `TypeKnowledge` (with `is_var`,
  `is_component`, `is_signal`) and `MemoryKnowledge` (with
  `set_concrete_dimensions`, which also derives `full_length`) raise
  `ValueError` when read before being set.
- `circuit_structure.expressions` – expression nodes `InfixOp`, `PrefixOp`,
  `InlineSwitchOp`, `ParallelOp`, `Variable`, `Number`, `Call` and
  `ArrayInLine`; the `InfixOpcode` and `PrefixOpcode` enums; and the accesses
  `ComponentAccess` and `ArrayAccess`. `str()` renders an expression as
  source-like text, e.g. `(a + 1)` or `f(x, y)`.
- `circuit_structure.statements` – statement nodes `IfThenElse`, `While`,
  `Return`, `InitializationBlock`, `Declaration`, `Substitution`,
  `ConstraintEquality`, `LogCall`, `Block` and `Assert`; the enums
  `AssignOp`, `SignalType`, `SignalElementType` and `VariableKind`;
  `VariableType` (built with `VariableType.var()`, `.component()` or
  `.signal(...)`); log arguments `LogStr` and `LogExp`; definitions
  `Template` and `Function`; `Include`; and the program node `AST`, which
  sets `custom_gates_declared` from its templates and offers `decompose()`.
  `build_log_call` splits string arguments into chunks of at most 230
  characters.
- `circuit_structure.shortcuts` – desugaring helpers: `plusplus`, `subsub`,
  `assign_with_op_shortcut`, `for_into_while` and
  `split_declaration_into_single_nodes` (which takes `Symbol` records).
- `circuit_structure.errors` – `CFGError` and its subclasses
  `UndefinedVariableError`, `InvalidVariableNameError`,
  `ShadowingVariableWarning` and `ParameterNameCollisionError`. Each carries a
  `severity`, a `code`, a `report_message`, source `labels` and `notes`.
- `circuit_structure.parameters` – `Parameters`, built directly or with
  `Parameters.from_definition`; supports `len()`, iteration and `in`.
- `circuit_structure.unique_vars` – `ensure_unique_variables(body,
  parameters, reports)` renames redeclared variables (`x` becomes `x.0`,
  `x.1`, …) together with their uses in scope, appends a
  `ShadowingVariableWarning` to `reports` for each declaration that shadows a
  visible one, and raises `ParameterNameCollisionError` when two parameters
  share a name.

## Example

```python
from circuit_structure.meta import Meta
from circuit_structure.shortcuts import plusplus

stmt = plusplus(Meta(0, 3), ("i", []))
print(stmt)  # i = (i + 1)
```

`fill` numbers a node and its descendants in pre-order, sets their file id
and returns the next unused element id:

```python
next_id = stmt.fill(file_id=0, elem_id=0)
```

## What it does not do

There is no parser: trees are built in Python code. The package does not
build control-flow graphs, basic blocks or SSA form, and has no command-line
tool.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```