from app.crud.base import CRUDBase
from app.models.test import Test
from app.schemas.test import TestCreate, TestUpdate

class CRUDTest(CRUDBase[Test, TestCreate, TestUpdate]):
    pass

test = CRUDTest(Test)
