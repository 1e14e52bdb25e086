from .month import month_nav_sidebar, empty_month_section
from .budget import alert_banner, income_section, summary_cards, budget_table_section, category_section
from .charts import charts_section
from .yearly import yearly_section
from .salary import salary_section
from .investments import investments_section
from .sync import backup_section
