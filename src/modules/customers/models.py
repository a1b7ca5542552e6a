"""Customer model.

The repository is the only writer of this table.  E-mail uniqueness is a
service-level rule checked on creation, so the column is indexed but
carries no ``unique`` constraint.
"""

from __future__ import annotations

from django.db import models


class Customer(models.Model):
    """Customer record of the service-order application.

    ``id`` stays ``None`` until the repository persists the instance.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, db_index=True)
    phone = models.CharField(max_length=20)

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"
