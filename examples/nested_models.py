"""
Example: hydrating a small order model from parsed JSON.

Shows nested models, typed lists, a before-fill hook reshaping scalar input,
a dependent object kept in sync, and identity preserved across refills.
"""

from hydramodel import HydratableModel, register


class Money:
    def __init__(self, data=None):
        self.amount = float(data or 0)


class Tag(HydratableModel):
    data_configuration = {"name": "String"}
    # Tags may arrive as plain strings
    on_before_fill = [lambda tag, data: data if isinstance(data, dict) else {"name": data}]


class Line(HydratableModel):
    unique_object_id_prefix = "line#"
    data_configuration = {"sku": "String", "quantity": "Number", "price": Money}


class Order(HydratableModel):
    data_configuration = {
        "_dynamic_properties": False,
        "number": "String",
        "lines": [Line],
        "tags": [Tag],
    }


register(Tag)
register(Line)
register(Order)


def _total(order, totals):
    totals["total"] = sum(line.quantity * line.price.amount for line in order.lines)


order = Order(
    {
        "number": "A-1",
        "lines": [{"sku": "pen", "quantity": 2, "price": "1.5"}],
        "tags": "urgent",
        "ignored": "static mode drops unknown keys",
    }
)
totals = order.create_dependent_object({}, _total)
print(f"{order.number}: {[line._object_id for line in order.lines]} total={totals['total']}")

lines = order.lines
order.fill_data(
    {
        "number": "A-1",
        "lines": [
            {"sku": "pen", "quantity": 2, "price": "1.5"},
            {"sku": "ink", "quantity": 1, "price": "4"},
        ],
        "tags": ["urgent", {"name": "gift"}],
    }
)
print(f"same list object: {order.lines is lines}, total={totals['total']}")
print(f"tags: {[tag.name for tag in order.tags]}")
