"""
Management command to create sample data for trying the API.

Usage:
    python manage.py seed_sample_data [--clear]

This creates:
- 6 users (superadmin, admin, two managers, client, guest)
- 2 projects with plots and lands
- Cameras on the client's plot and land
- Visit requests, one of them approved with a QR pass
- A buy request and a sell request
- An office with its managers and a pending leave request
- Notifications and a banner ad
"""

from datetime import date, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole
from apps.inventory.models import Project, PropertyStatus
from apps.inventory.services import create_plot, create_land, assign_land
from apps.cameras.models import Camera, LandCamera
from apps.visits.models import VisitRequest
from apps.visits.services import create_visit_request, approve_visit_request
from apps.deals.models import BuyRequest, SellRequest
from apps.deals.services import create_buy_request, create_sell_request
from apps.staff.models import Office, LeaveRequest
from apps.staff.services import assign_manager_to_office, create_leave_request
from apps.announcements.models import Notification, BannerAd
from apps.announcements.services import send_notification

PASSWORD = 'password123'


class Command(BaseCommand):
    help = 'Create sample data for trying the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        plots, lands = self.create_inventory(users)
        self.create_cameras(plots, lands)
        self.create_visits(users, plots)
        self.create_deals(users, lands)
        self.create_staff(users)
        self.create_announcements()

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts (password: %s):' % PASSWORD)
        for user in users.values():
            self.stdout.write(f'  {user.email} ({user.role})')

    def clear_data(self):
        """Clear all data from the database."""
        Notification.objects.all().delete()
        BannerAd.objects.all().delete()
        LeaveRequest.objects.all().delete()
        Office.objects.all().delete()
        SellRequest.objects.all().delete()
        BuyRequest.objects.all().delete()
        VisitRequest.objects.all().delete()
        Camera.objects.all().delete()
        LandCamera.objects.all().delete()
        for project in Project.objects.all():
            project.plots.all().delete()
            project.delete()
        User.objects.filter(is_superuser=False).delete()

    def create_users(self):
        """Create one account per role, plus a second manager."""
        self.stdout.write('  Creating users...')

        user_data = [
            ('superadmin', 'superadmin@example.com', 'Sam Super', UserRole.SUPERADMIN),
            ('admin', 'admin@example.com', 'Asha Admin', UserRole.ADMIN),
            ('manager', 'manager@example.com', 'Manoj Manager', UserRole.MANAGER),
            ('manager2', 'manager2@example.com', 'Meera Manager', UserRole.MANAGER),
            ('client', 'client@example.com', 'Chris Client', UserRole.CLIENT),
            ('guest', 'guest@example.com', 'Gita Guest', UserRole.GUEST),
        ]

        users = {}
        for key, email, name, role in user_data:
            user, _ = User.objects.get_or_create(
                email=email,
                defaults={
                    'name': name,
                    'role': role,
                    'phone': '+91 98450 00000',
                    'clerk_id': f'user_seed_{key}',
                }
            )
            user.set_password(PASSWORD)
            user.save()
            users[key] = user

        return users

    def create_inventory(self, users):
        """Create projects, plots and lands, and sell one land to the client."""
        self.stdout.write('  Creating projects, plots and lands...')

        projects_data = [
            {
                'name': 'Green Valley',
                'location': 'Devanahalli, Bengaluru',
                'description': 'Gated layout close to the airport.',
                'plots': [
                    ('Plot A1', '30x40', Decimal('1800000'), '18 Lakh', 'East'),
                    ('Plot A2', '40x60', Decimal('3600000'), '36 Lakh', 'North'),
                ],
            },
            {
                'name': 'Lake View Enclave',
                'location': 'Hoskote, Bengaluru',
                'description': 'Lakefront plots with a clubhouse.',
                'plots': [
                    ('Plot B1', '30x50', Decimal('2250000'), '22.5 Lakh', 'West'),
                ],
            },
        ]

        plots = []
        for data in projects_data:
            project, _ = Project.objects.get_or_create(
                name=data['name'],
                defaults={
                    'location': data['location'],
                    'description': data['description'],
                }
            )
            for title, dimension, price, label, facing in data['plots']:
                if project.plots.filter(title=title).exists():
                    plots.append(project.plots.get(title=title))
                    continue
                plots.append(create_plot(
                    project_id=project.id,
                    title=title,
                    dimension=dimension,
                    price=price,
                    price_label=label,
                    location=data['location'],
                    latitude=13.24,
                    longitude=77.71,
                    facing=facing,
                    amenities=['Water supply', 'Street lights', 'Park'],
                    description=f'{dimension} {facing.lower()} facing plot in {project.name}.',
                    total_area=1200,
                ))

        lands = []
        for plot in plots:
            for number in range(1, 4):
                land = plot.lands.filter(number=f'L-{number}').first()
                if land is None:
                    land = create_land(
                        plot_id=plot.id,
                        number=f'L-{number}',
                        size='600 sqft',
                        price=(plot.price / 3).quantize(Decimal('0.01')),
                    )
                lands.append(land)

        sold = lands[0]
        if sold.status != PropertyStatus.SOLD:
            sold = assign_land(land_id=sold.id, client_id=users['client'].id)
            lands[0] = sold

        plot = plots[0]
        plot.owner = users['client']
        plot.status = PropertyStatus.SOLD
        plot.save(update_fields=['owner', 'status', 'updated_at'])

        return plots, lands

    def create_cameras(self, plots, lands):
        """Attach cameras to the client's plot and land."""
        self.stdout.write('  Creating cameras...')

        Camera.objects.get_or_create(
            plot=plots[0],
            ip_address='http://10.0.0.21/stream',
            defaults={'label': 'Gate'}
        )
        LandCamera.objects.get_or_create(
            land=lands[0],
            ip_address='http://10.0.0.31/stream',
            defaults={'label': 'North corner'}
        )

    def create_visits(self, users, plots):
        """Create a pending and an approved visit request."""
        self.stdout.write('  Creating visit requests...')

        if VisitRequest.objects.exists():
            return

        visit_date = date.today() + timedelta(days=3)
        create_visit_request(
            plot_id=plots[1].id,
            name='Walk-in Visitor',
            email='visitor@example.com',
            phone='+91 98450 11111',
            date=visit_date,
            time='10:00 AM',
        )
        visit = create_visit_request(
            plot_id=plots[2].id,
            name=users['guest'].name,
            email=users['guest'].email,
            phone=users['guest'].phone,
            date=visit_date,
            time='04:00 PM',
            user=users['guest'],
        )
        approve_visit_request(visit_id=visit.id)

    def create_deals(self, users, lands):
        """Create a buy request from the guest and a sell request from the client."""
        self.stdout.write('  Creating buy and sell requests...')

        if not BuyRequest.objects.exists():
            create_buy_request(
                user=users['guest'],
                land_id=lands[4].id,
                message='Is a home loan tie-up available?',
            )

        if not SellRequest.objects.exists():
            create_sell_request(
                user=users['client'],
                land_id=lands[0].id,
                asking_price=(lands[0].price * Decimal('1.2')).quantize(Decimal('0.01')),
                terms_accepted=True,
                reason='Relocating to another city',
            )

    def create_staff(self, users):
        """Create an office with both managers and a pending leave request."""
        self.stdout.write('  Creating offices and leave requests...')

        office, _ = Office.objects.get_or_create(
            name='Devanahalli Site Office',
            defaults={'latitude': 13.25, 'longitude': 77.71}
        )
        for key in ['manager', 'manager2']:
            assign_manager_to_office(office_id=office.id, manager_id=users[key].id)

        if not LeaveRequest.objects.exists():
            start = date.today() + timedelta(days=14)
            create_leave_request(
                manager=users['manager'],
                start_date=start,
                end_date=start + timedelta(days=2),
                reason='Family function',
            )

    def create_announcements(self):
        """Broadcast a welcome notification and create a banner ad."""
        self.stdout.write('  Creating notifications and banner ads...')

        if not Notification.objects.exists():
            send_notification(
                title='Welcome',
                message='Track your plot, cameras and visits from the dashboard.',
                target_role=UserRole.CLIENT,
            )

        BannerAd.objects.get_or_create(
            title='Festive offer',
            defaults={
                'description': 'Zero registration charges this month.',
                'image_url': 'https://example.com/banners/festive.png',
            }
        )
