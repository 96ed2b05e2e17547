# app/models/__init__.py

from .employee import *
from .enums import *
# add all your models here for easy import elsewhere
