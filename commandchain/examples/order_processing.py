"""
Order processing example demonstrating commands, nested chains and revert.
"""

import logging
import time

from commandchain import Command, CommandError, CommandListener, LoggingListener, SimpleChain


INVENTORY = {'Widget': 5, 'Gadget': 1, 'Doohickey': 10}


# Commands
class ValidateOrder(Command):
    def execute(self, context):
        order = context.get('order')

        if not order:
            raise CommandError("Order is missing", self)

        if not order.get('items'):
            raise CommandError("Order has no items", self)

        if not order.get('customer_id'):
            raise CommandError("Customer ID is missing", self)

        print(f"✓ Order validated for customer {order['customer_id']}")


class CalculateTotals(Command):
    def execute(self, context):
        items = context['order']['items']

        subtotal = sum(item['price'] * item['quantity'] for item in items)
        tax = subtotal * 0.08  # 8% tax
        context['subtotal'] = subtotal
        context['tax'] = tax
        context['total'] = subtotal + tax

        print(f"✓ Calculated totals - Subtotal: ${subtotal:.2f}, Tax: ${tax:.2f}, "
              f"Total: ${context['total']:.2f}")


class ReserveInventory(Command):
    """Reserves items one by one; revert releases what was reserved before the failure."""

    def execute(self, context):
        inventory = context['inventory']
        reserved = context.setdefault('reserved', {})

        for item in context['order']['items']:
            name, quantity = item['name'], item['quantity']
            if inventory.get(name, 0) < quantity:
                raise CommandError(f"Not enough {name} in stock", self)
            inventory[name] -= quantity
            reserved[name] = reserved.get(name, 0) + quantity
            print(f"  Reserved {quantity} x {name}")

        print("✓ Inventory reserved")

    def revert(self, context):
        inventory = context['inventory']
        for name, quantity in context.pop('reserved', {}).items():
            inventory[name] += quantity
            print(f"  Released {quantity} x {name}")


class ProcessPayment(Command):
    def execute(self, context):
        total = context['total']
        payment_method = context['order'].get('payment_method', 'credit_card')

        context['payment_id'] = f"PAY-{hash(str(total)) % 100000:05d}"
        print(f"✓ Payment processed: {context['payment_id']} (${total:.2f} via {payment_method})")


class CreateShipment(Command):
    def execute(self, context):
        customer_id = context['order']['customer_id']

        shipment_id = f"SHIP-{hash(customer_id) % 100000:05d}"
        context['shipment_id'] = shipment_id
        print(f"✓ Shipment created: {shipment_id}")


# Listeners
class PerformanceListener(CommandListener):
    def __init__(self):
        self.timings = {}
        self._started = {}

    def command_started(self, command, context):
        self._started[id(command)] = time.perf_counter()

    def command_finished(self, command, context, error):
        elapsed = (time.perf_counter() - self._started.pop(id(command))) * 1000
        self.timings.setdefault(str(command), []).append(elapsed)

    def report(self):
        print("\n" + "=" * 60)
        print("Performance Report")
        print("=" * 60)
        for command, times in sorted(self.timings.items()):
            avg = sum(times) / len(times)
            print(f"{command:30} avg: {avg:6.2f}ms  calls: {len(times)}")


def create_sample_order(order_id, customer_id, gadgets=1):
    return {
        'id': order_id,
        'customer_id': customer_id,
        'payment_method': 'credit_card',
        'items': [
            {'name': 'Widget', 'price': 19.99, 'quantity': 2},
            {'name': 'Gadget', 'price': 49.99, 'quantity': gadgets},
        ]
    }


def build_order_chain(listener=None):
    fulfilment = SimpleChain([ReserveInventory(), CreateShipment()], listener=LoggingListener())
    return SimpleChain(
        [ValidateOrder(), CalculateTotals(), fulfilment, ProcessPayment()],
        listener=listener,
    )


def main():
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(message)s")

    print("=" * 60)
    print("CommandChain Order Processing Example")
    print("=" * 60)

    performance = PerformanceListener()
    order_chain = build_order_chain(performance)
    print(f"\nChain: {order_chain}\n")

    inventory = dict(INVENTORY)
    orders = [
        create_sample_order('ORD-001', 'CUST-123'),
        create_sample_order('ORD-002', 'CUST-456', gadgets=3),
    ]

    successful = 0
    failed = 0

    for order in orders:
        print(f"\n[{order['id']}]")
        context = {'order': order, 'inventory': inventory}
        try:
            order_chain.execute(context)
        except CommandError as e:
            failed += 1
            print(f"\n✗ Order {order['id']} failed: {e}")
        else:
            successful += 1
            print(f"\n✓ Order {order['id']} processed successfully")

    performance.report()

    print("\n" + "=" * 60)
    print(f"Summary: {successful} successful, {failed} failed")
    print(f"Inventory left: {inventory}")
    print("=" * 60)


if __name__ == "__main__":
    main()
