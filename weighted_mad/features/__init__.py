from .extractor import *
from .medabsdev import *
from .weightmad import *
from .weightmedian import *
