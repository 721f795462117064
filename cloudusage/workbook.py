import pathlib

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from .cloud_utils import build_location
from .errors import OutputError
from .size_utils import convert_size

COLUMNS = ['Server', 'Volume Name', 'Size', 'Size (GiB)', 'Location']


class UsageWorkbook(Workbook):
    """A workbook with one sheet of volumes and a total row."""

    def __init__(self, path, service, scheme='gs', **kwargs):
        super().__init__(**kwargs)
        self.uwb_path = pathlib.Path(path)
        self.scheme = scheme
        self.sheet = self.active
        self.sheet.title = service.title()
        self.sheet.append(COLUMNS)

    def addvolume(self, row):
        self.sheet.append([row.server, row.name, row.size,
                           round(convert_size(row.size, 'GiB', withsuffix=False), 2),
                           build_location(row.bucket, row.uuid, self.scheme)])
        self.sheet[f'D{self.sheet.max_row}'].number_format = '#,##0.00'

    def close(self):
        ws = self.sheet
        last_row = ws.max_row
        ws.auto_filter.ref = f"A1:E{last_row}"
        ws.append(['', 'Totals', '', f'=SUBTOTAL(109, D2:D{last_row})', ''])
        ws[f'D{ws.max_row}'].number_format = '#,##0.00'
        self.fix_column_widths()
        try:
            self.save(self.uwb_path)
        except OSError as e:
            raise OutputError(self.uwb_path, e) from e
        return self.uwb_path

    def fix_column_widths(self):
        ws = self.sheet
        for idx, column_cells in enumerate(ws.columns, 1):
            header_text_width = len(str(column_cells[0].value))
            data_text_width = max((len(str(cell.value or '')) for cell in column_cells[1:]), default=0)
            if header_text_width > data_text_width:
                length = header_text_width + (4 if header_text_width < 5 else 3)
            else:
                length = data_text_width * 1.2
            ws.column_dimensions[get_column_letter(idx)].width = length


def create_workbook(service, rows, csv_path, scheme='gs'):
    """Write the rows to an xlsx next to the csv and return its path."""
    wb = UsageWorkbook(pathlib.Path(csv_path).with_suffix('.xlsx'), service, scheme)
    for row in rows:
        wb.addvolume(row)
    return wb.close()
