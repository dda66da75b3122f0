import pytest

from mrp import db

# SUB-BOT
# ├── 2 x SUB-ARM
# │   ├── 1 x MOTOR
# │   └── 6 x BOLT
# ├── 1 x SUB-BASE
# │   ├── 1 x PLATE
# │   ├── 4 x WHEEL
# │   └── 8 x BOLT
# └── 4 x BOLT
PARTS = [
    ('SUB-BOT', 'Robot', 250.0, 1),
    ('SUB-ARM', 'Arm assembly', 40.0, 1),
    ('SUB-BASE', 'Base assembly', 60.0, 0),
    ('BOLT', 'M4 bolt', 0.05, 100),
    ('MOTOR', 'Servo motor', 12.5, 2),
    ('PLATE', 'Base plate', 8.0, 5),
    ('WHEEL', 'Caster wheel', 1.25, 3),
]

BOM = [
    ('SUB-BOT', 'SUB-ARM', 2),
    ('SUB-BOT', 'SUB-BASE', 1),
    ('SUB-BOT', 'BOLT', 4),
    ('SUB-ARM', 'MOTOR', 1),
    ('SUB-ARM', 'BOLT', 6),
    ('SUB-BASE', 'PLATE', 1),
    ('SUB-BASE', 'WHEEL', 4),
    ('SUB-BASE', 'BOLT', 8),
]


@pytest.fixture
def conn():
    connection = db.connect(':memory:')
    db.create_tables(connection)
    connection.executemany('INSERT INTO part (sku, description, price, stock) VALUES (?, ?, ?, ?)', PARTS)
    connection.executemany('INSERT INTO bom (parent_sku, sku, quantity) VALUES (?, ?, ?)', BOM)
    connection.commit()
    yield connection
    connection.close()


def stock_of(connection, sku):
    return connection.execute('SELECT stock FROM part WHERE sku = ?', (sku,)).fetchone()[0]
